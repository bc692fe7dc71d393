"""Exercise catalog model."""

from dataclasses import dataclass

# Photo paths stored by older clients carry the server folder prefix
LEGACY_PHOTO_PREFIX = "/server"


def normalize_photo(photo: str | None) -> str | None:
    """Strip the legacy server prefix from a stored photo path."""
    if not photo:
        return None
    return photo.replace(LEGACY_PHOTO_PREFIX, "", 1) if photo.startswith(LEGACY_PHOTO_PREFIX) else photo


@dataclass
class Exercise:
    """An entry in the exercise catalog."""

    name: str
    photo: str | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "photo": normalize_photo(self.photo),
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id if id is not None else data.get("id"),
            name=data["name"],
            photo=data.get("photo"),
        )
