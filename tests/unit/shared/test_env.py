from __future__ import annotations

from liveness.shared.env import load_secret_file_variables


def test_secret_file_is_exposed(tmp_path) -> None:
    secret = tmp_path / "redis_host"
    secret.write_text("redis://:s3cret@redis:6379/15\n", encoding="utf-8")
    environ = {"REDIS_HOST_FILE": str(secret)}

    resolved = load_secret_file_variables(environ)

    assert resolved == ["REDIS_HOST"]
    assert environ["REDIS_HOST"] == "redis://:s3cret@redis:6379/15"


def test_existing_value_wins(tmp_path) -> None:
    secret = tmp_path / "mongo_host"
    secret.write_text("mongodb:27017", encoding="utf-8")
    environ = {"MONGO_HOST": "localhost:27017", "MONGO_HOST_FILE": str(secret)}

    assert load_secret_file_variables(environ) == []
    assert environ["MONGO_HOST"] == "localhost:27017"


def test_missing_file_is_skipped(tmp_path) -> None:
    environ = {"MONGO_HOST_FILE": str(tmp_path / "absent"), "EMPTY_FILE": ""}

    assert load_secret_file_variables(environ) == []
    assert "MONGO_HOST" not in environ
