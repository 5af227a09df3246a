"""HTTP interface to the user operations."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, request

from workbench.users.model import UserRequest, ValidationError
from workbench.users.repository import (
    MessageRepository,
    RepositoryError,
    UserRepository,
    connect,
)
from workbench.users.transaction import Transaction
from workbench.users.usecase import UserUsecase

DEFAULT_PORT = 8080


def _lookup(data: dict[str, Any], name: str) -> Any:
    wanted = name.casefold()
    found = None
    for key, value in data.items():
        if key.casefold() == wanted:
            found = value
    return found


def load_config(path: str | Path) -> dict[str, str]:
    """Read ``dsn`` and ``suffix`` from a JSON file.

    A missing file raises ``OSError``; unreadable JSON leaves both empty.
    """
    with open(path, encoding="utf-8") as stream:
        text = stream.read()
    config = {"dsn": "", "suffix": ""}
    try:
        data = json.loads(text)
    except ValueError:
        return config
    if isinstance(data, dict):
        for name in config:
            value = _lookup(data, name)
            if isinstance(value, str):
                config[name] = value
    return config


def _error(exc: Exception):
    if isinstance(exc, ValidationError):
        return jsonify({"message": str(exc)}), 400
    return jsonify({}), 400


def _bind() -> UserRequest:
    raw = request.get_data()
    if not raw:
        return UserRequest()
    if not request.is_json:
        raise ValidationError("Unsupported Media Type")
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    return UserRequest.from_dict(data)


def create_app(usecase: UserUsecase) -> Flask:
    """Build the application serving ``/users``."""
    app = Flask(__name__)

    @app.post("/users")
    def create_user():
        try:
            body = _bind()
            body.validate()
        except ValidationError as exc:
            return _error(exc)
        try:
            user_id = usecase.create(body.to_model())
        except RepositoryError as exc:
            return _error(exc)
        return jsonify(user_id), 200

    @app.get("/users/<user_id>")
    def get_user(user_id: str):
        try:
            user = usecase.get_by_id(user_id)
        except RepositoryError as exc:
            return _error(exc)
        return jsonify(user.to_dict()), 200

    @app.put("/users/<user_id>")
    def update_user(user_id: str):
        try:
            body = _bind()
            body.validate()
        except ValidationError as exc:
            return _error(exc)
        try:
            usecase.update(body.to_model())
        except RepositoryError:
            pass
        return "", 200

    @app.delete("/users/<user_id>")
    def delete_user(user_id: str):
        try:
            usecase.delete(user_id)
        except RepositoryError as exc:
            return _error(exc)
        return jsonify(user_id), 200

    return app


def _default_config_path() -> Path:
    return Path(sys.argv[0]).resolve().parent.parent / "config" / "env.json"


def main(argv: list[str] | None = None) -> int:
    """Serve the user API on port 8080 using the configuration file given or the default one."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else _default_config_path()
    try:
        config = load_config(path)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    conn = connect(config["dsn"])
    usecase = UserUsecase(UserRepository(conn), MessageRepository(conn), Transaction(conn))
    app = create_app(usecase)
    try:
        app.run(host="0.0.0.0", port=DEFAULT_PORT)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())