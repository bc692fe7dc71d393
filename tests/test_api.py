"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from factories import register
from gymflow.config import Settings
from gymflow.web import create_app


def _create_workout(client, user_id, kind="gym", name="Push"):
    response = client.post(
        "/createWorkout", json={"name": name, "kind": kind, "userId": user_id}
    )
    assert response.status_code == 201
    return response.json()["workoutId"]


def _add_exercise(client, workout_id, exercise_id, user_id, kind="gym"):
    return client.post(
        "/addExerciseToWorkout",
        json={
            "workoutId": workout_id,
            "kind": kind,
            "exerciseId": exercise_id,
            "userId": user_id,
        },
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuthRoutes:
    """Tests for /register and /login."""

    def test_register(self, client):
        response = client.post(
            "/register",
            json={"userName": "ana", "email": "ana@example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert isinstance(body["userId"], int)

    def test_register_with_image(self, client):
        response = client.post(
            "/register",
            json={
                "userName": "ana",
                "email": "ana@example.com",
                "password": "x",
                "image": "/uploads/ana.png",
            },
        )
        user_id = response.json()["userId"]

        user = client.get(f"/getDataEditUsers/{user_id}").json()["user"]
        assert user["profilePictureUrl"] == "/uploads/ana.png"

    def test_register_missing_field(self, client):
        response = client.post("/register", json={"userName": "ana", "password": "x"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "email" in body["message"]

    def test_register_blank_user_name(self, client):
        response = client.post(
            "/register",
            json={"userName": "   ", "email": "a@example.com", "password": "x"},
        )
        assert response.status_code == 400

    def test_duplicate_email(self, client):
        register(client, "ana")
        response = client.post(
            "/register",
            json={"userName": "other", "email": "ana@example.com", "password": "x"},
        )

        assert response.status_code == 409
        assert response.json() == {"success": False, "message": "Email already registered"}

    def test_duplicate_user_name(self, client):
        register(client, "ana")
        response = client.post(
            "/register",
            json={"userName": "ana", "email": "other@example.com", "password": "x"},
        )
        assert response.status_code == 409

    def test_login_with_email_or_user_name(self, client):
        user_id = register(client, "ana", password="pw")

        for identifier in ("ana", "ana@example.com"):
            response = client.post("/login", json={"identifier": identifier, "password": "pw"})
            assert response.status_code == 200
            body = response.json()
            assert body["token"]
            assert body["user"]["id"] == user_id
            assert "password" not in body["user"]

    def test_login_wrong_password(self, client):
        register(client, "ana", password="pw")
        response = client.post("/login", json={"identifier": "ana", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_login_unknown_user(self, client):
        response = client.post("/login", json={"identifier": "ghost", "password": "pw"})
        assert response.status_code == 401


class TestUserRoutes:
    def test_get_profile(self, client):
        user_id = register(client, "ana")
        response = client.get(f"/getDataEditUsers/{user_id}")

        assert response.status_code == 200
        assert response.json()["user"]["userName"] == "ana"

    def test_get_missing_profile(self, client):
        response = client.get("/getDataEditUsers/999")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_edit_only_supplied_fields(self, client):
        user_id = register(client, "ana")
        response = client.put(f"/editusers/{user_id}", json={"email": "new@example.com"})
        assert response.status_code == 200

        user = client.get(f"/getDataEditUsers/{user_id}").json()["user"]
        assert user["email"] == "new@example.com"
        assert user["userName"] == "ana"

    def test_edit_password_allows_new_login(self, client):
        user_id = register(client, "ana", password="old")
        client.put(f"/editusers/{user_id}", json={"password": "new"})

        assert client.post("/login", json={"identifier": "ana", "password": "new"}).status_code == 200
        assert client.post("/login", json={"identifier": "ana", "password": "old"}).status_code == 401

    def test_edit_with_nothing_to_change(self, client):
        user_id = register(client, "ana")
        response = client.put(f"/editusers/{user_id}", json={})
        assert response.status_code == 400

    def test_edit_to_taken_user_name(self, client):
        register(client, "ana")
        bea = register(client, "bea")
        response = client.put(f"/editusers/{bea}", json={"userName": "ana"})
        assert response.status_code == 409

    def test_delete_user_removes_workouts_and_ranking(self, client):
        user_id = register(client, "ana")
        _create_workout(client, user_id)
        client.post("/addPoint", json={"userId": user_id})

        response = client.delete(f"/deleteUsers/{user_id}")
        assert response.status_code == 200

        assert client.get(f"/viewWorkouts/{user_id}").json()["workouts"] == []
        assert client.get("/ranking").json()["ranking"] == []
        assert client.delete(f"/deleteUsers/{user_id}").status_code == 404


class TestExerciseCatalog:
    def test_list_is_alphabetical_bare_list(self, client):
        response = client.get("/exercicios")

        assert response.status_code == 200
        catalog = response.json()
        assert isinstance(catalog, list)
        assert [e["name"] for e in catalog] == ["Bench Press", "Deadlift", "Running", "Squat"]

    def test_legacy_photo_paths_normalized(self, client):
        catalog = client.get("/exercicios").json()
        bench = next(e for e in catalog if e["name"] == "Bench Press")
        assert bench["photo"] == "/uploads/bench_press.png"


class TestWorkoutRoutes:
    """Tests for workout creation, listing, renaming and deletion."""

    def test_create_then_view(self, client):
        user_id = register(client, "ana")
        gym_id = _create_workout(client, user_id, "gym", "Leg Day")
        cardio_id = _create_workout(client, user_id, "cardio", "5k")

        workouts = client.get(f"/viewWorkouts/{user_id}").json()["workouts"]

        assert {"id": gym_id, "userId": user_id, "name": "Leg Day", "kind": "gym"} in workouts
        assert {"id": cardio_id, "userId": user_id, "name": "5k", "kind": "cardio"} in workouts

    def test_create_invalid_kind(self, client):
        user_id = register(client, "ana")
        response = client.post(
            "/createWorkout", json={"name": "Yoga", "kind": "yoga", "userId": user_id}
        )

        assert response.status_code == 400
        assert "kind" in response.json()["message"]

    def test_create_missing_name(self, client):
        user_id = register(client, "ana")
        response = client.post("/createWorkout", json={"kind": "gym", "userId": user_id})
        assert response.status_code == 400

    def test_create_for_unknown_user(self, client):
        response = client.post(
            "/createWorkout", json={"name": "Push", "kind": "gym", "userId": 999}
        )
        assert response.status_code == 404

    def test_rename(self, client):
        user_id = register(client, "ana")
        workout_id = _create_workout(client, user_id)

        response = client.put(
            f"/updateWorkout/{workout_id}", json={"name": "Push Heavy", "kind": "gym"}
        )
        assert response.status_code == 200

        names = [w["name"] for w in client.get(f"/viewWorkouts/{user_id}").json()["workouts"]]
        assert names == ["Push Heavy"]

    def test_rename_missing(self, client):
        response = client.put("/updateWorkout/77", json={"name": "x", "kind": "cardio"})
        assert response.status_code == 404

    def test_delete_with_exercises(self, client):
        user_id = register(client, "ana")
        workout_id = _create_workout(client, user_id)
        _add_exercise(client, workout_id, 1, user_id)

        response = client.delete(f"/deleteWorkout/{workout_id}/gym")
        assert response.status_code == 200

        assert client.get(f"/viewWorkouts/{user_id}").json()["workouts"] == []
        listing = client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"]
        assert listing == []

    def test_delete_invalid_kind(self, client):
        assert client.delete("/deleteWorkout/1/pilates").status_code == 400

    def test_delete_missing(self, client):
        assert client.delete("/deleteWorkout/1/gym").status_code == 404

    @pytest.mark.parametrize(
        "path",
        [
            "/deleteWorkout/100000000000000000000/gym",
            "/deleteWorkout/0/gym",
            "/viewWorkouts/100000000000000000000",
            "/workoutExercises/100000000000000000000/cardio",
            "/deleteExercise/100000000000000000000/gym",
        ],
    )
    def test_out_of_range_ids_rejected(self, client, path):
        method = client.delete if path.startswith("/delete") else client.get
        response = method(path)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_oversized_user_id_in_body_rejected(self, client):
        response = client.post(
            "/createWorkout", json={"name": "Push", "kind": "gym", "userId": 10**20}
        )
        assert response.status_code == 400


class TestWorkoutExerciseRoutes:
    """Tests for exercises inside workouts."""

    @pytest.fixture
    def gym_workout(self, client):
        user_id = register(client, "ana")
        return _create_workout(client, user_id), user_id

    def test_add_and_list(self, client, gym_workout):
        workout_id, user_id = gym_workout
        first = _add_exercise(client, workout_id, 1, user_id)
        second = _add_exercise(client, workout_id, 2, user_id)
        assert first.status_code == 201

        exercises = client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"]

        assert [e["associationId"] for e in exercises] == [
            second.json()["associationId"],
            first.json()["associationId"],
        ]
        assert exercises[1]["exerciseName"] == "Bench Press"
        assert exercises[1]["kind"] == "gym"

    def test_add_duplicate(self, client, gym_workout):
        workout_id, user_id = gym_workout
        _add_exercise(client, workout_id, 1, user_id)
        response = _add_exercise(client, workout_id, 1, user_id)

        assert response.status_code == 409
        assert response.json()["success"] is False

    def test_add_unknown_exercise(self, client, gym_workout):
        workout_id, user_id = gym_workout
        assert _add_exercise(client, workout_id, 999, user_id).status_code == 404

    def test_add_with_unknown_owner(self, client, gym_workout):
        workout_id, _ = gym_workout
        response = _add_exercise(client, workout_id, 1, 999)

        assert response.status_code == 404
        assert response.json()["message"] == "Workout, exercise or user not found"

    def test_add_missing_field(self, client, gym_workout):
        workout_id, _ = gym_workout
        response = client.post(
            "/addExerciseToWorkout", json={"workoutId": workout_id, "kind": "gym"}
        )
        assert response.status_code == 400

    def test_update_gym_details(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 3, user_id).json()["associationId"]

        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": association_id, "weight": 40, "reps": 10, "sets": 3},
        )

        assert response.status_code == 200
        assert response.json()["affectedRows"] == 1
        entry = client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"][0]
        assert (entry["weight"], entry["reps"], entry["sets"]) == (40, 10, 3)

    def test_update_gym_details_legacy_field_name(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 3, user_id).json()["associationId"]

        response = client.post(
            "/updateExerciseDetails",
            json={"gymWorkoutExerciseId": association_id, "weight": "20.5", "reps": "12", "sets": "4"},
        )

        assert response.status_code == 200
        entry = client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"][0]
        assert entry["weight"] == 20.5

    def test_non_numeric_details_leave_entry_unchanged(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 3, user_id).json()["associationId"]
        client.post(
            "/updateExerciseDetails",
            json={"associationId": association_id, "weight": 40, "reps": 10, "sets": 3},
        )

        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": association_id, "weight": "heavy", "reps": 10, "sets": 3},
        )

        assert response.status_code == 400
        entry = client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"][0]
        assert entry["weight"] == 40

    def test_boolean_details_rejected(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 3, user_id).json()["associationId"]

        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": association_id, "weight": True, "reps": True, "sets": 3},
        )

        assert response.status_code == 400
        entry = client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"][0]
        assert entry["weight"] is None
        assert entry["reps"] is None

    def test_oversized_reps_rejected(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 3, user_id).json()["associationId"]

        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": association_id, "weight": 40, "reps": 10**20, "sets": 3},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_oversized_association_id_rejected(self, client):
        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": 10**20, "weight": 1, "reps": 1, "sets": 1},
        )
        assert response.status_code == 400

    def test_boolean_cardio_distance_rejected(self, client):
        user_id = register(client, "caio")
        workout_id = _create_workout(client, user_id, "cardio", "Run")
        association_id = _add_exercise(client, workout_id, 4, user_id, kind="cardio").json()[
            "associationId"
        ]

        response = client.post(
            "/updateCardioExerciseDetails",
            json={"associationId": association_id, "distance": True},
        )

        assert response.status_code == 400
        assert "Distance" in response.json()["message"]

    def test_update_details_missing_field(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 3, user_id).json()["associationId"]

        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": association_id, "weight": 40, "reps": 10},
        )
        assert response.status_code == 400

    def test_update_details_missing_entry(self, client):
        response = client.post(
            "/updateExerciseDetails",
            json={"associationId": 555, "weight": 1, "reps": 1, "sets": 1},
        )
        assert response.status_code == 404

    def test_cardio_details(self, client):
        user_id = register(client, "ana")
        workout_id = _create_workout(client, user_id, "cardio", "Run")
        association_id = _add_exercise(client, workout_id, 4, user_id, kind="cardio").json()[
            "associationId"
        ]

        response = client.post(
            "/updateCardioExerciseDetails",
            json={
                "cardioExerciseId": association_id,
                "description": "Tempo",
                "distance": "7,5",
                "type": "outdoor",
            },
        )
        assert response.status_code == 200

        entry = client.get(f"/workoutExercises/{workout_id}/cardio").json()["exercises"][0]
        assert entry["kind"] == "cardio"
        assert entry["distance"] == 7.5
        assert entry["description"] == "Tempo"
        assert "weight" not in entry

    def test_delete_exercise(self, client, gym_workout):
        workout_id, user_id = gym_workout
        association_id = _add_exercise(client, workout_id, 1, user_id).json()["associationId"]

        assert client.delete(f"/deleteExercise/{association_id}/gym").status_code == 200
        assert client.get(f"/workoutExercises/{workout_id}/gym").json()["exercises"] == []
        assert client.delete(f"/deleteExercise/{association_id}/gym").status_code == 404


class TestRankingRoutes:
    def test_add_point_increments(self, client):
        user_id = register(client, "ana")

        totals = [
            client.post("/addPoint", json={"userId": user_id}).json()["points"]
            for _ in range(3)
        ]
        assert totals == [1, 2, 3]

    def test_add_point_unknown_user(self, client):
        assert client.post("/addPoint", json={"userId": 999}).status_code == 404

    def test_ranking_order(self, client):
        ana = register(client, "ana")
        bea = register(client, "bea")
        register(client, "caio")
        client.post("/addPoint", json={"userId": bea})
        client.post("/addPoint", json={"userId": bea})
        client.post("/addPoint", json={"userId": ana})

        body = client.get("/ranking").json()

        assert body["total"] == 3
        assert [(r["position"], r["userName"], r["points"]) for r in body["ranking"]] == [
            (1, "bea", 2),
            (2, "ana", 1),
            (3, "caio", 0),
        ]


class TestRequiredAuth:
    """With authentication required, protected routes need a bearer token."""

    @pytest.fixture
    def secure_client(self, db_path):
        settings = Settings(
            db_path=db_path,
            data_dir=db_path.parent,
            jwt_secret="test-secret",
            require_auth=True,
        )
        with TestClient(create_app(settings)) as test_client:
            yield test_client

    def test_missing_token(self, secure_client):
        user_id = register(secure_client, "ana")
        response = secure_client.get(f"/viewWorkouts/{user_id}")

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_bad_header_format(self, secure_client):
        response = secure_client.get("/ranking", headers={"Authorization": "Token abc"})
        assert response.status_code == 401

    def test_invalid_token(self, secure_client):
        response = secure_client.get("/ranking", headers={"Authorization": "Bearer abc"})
        assert response.status_code == 401

    def test_token_from_login(self, secure_client):
        user_id = register(secure_client, "ana", password="pw")
        token = secure_client.post(
            "/login", json={"identifier": "ana", "password": "pw"}
        ).json()["token"]

        response = secure_client.get(
            f"/viewWorkouts/{user_id}", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200

    def test_public_routes_stay_open(self, secure_client):
        assert secure_client.get("/exercicios").status_code == 200
        assert secure_client.get("/health").status_code == 200
