from __future__ import annotations

import json

from typer.testing import CliRunner

from lardi_client import ApiError, CargoResponse, Response, ResponseContacts, TransportError
from lardi_cli import config, main
from lardi_cli.commands import cargo_cmd, contacts_cmd, refs_cmd

runner = CliRunner()


class _FakeClient:
    def __init__(self):
        self.created = None
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def get_currencies(self):
        return [Response(1, "UAH"), Response(2, "EUR")]

    def find_currency(self, name):
        return Response(2, "EUR") if name == "EUR" else None

    def get_units(self):
        raise TransportError("request failed: connection refused")

    def get_contacts(self):
        return [ResponseContacts(contact_id=7, contact_name="Olena")]

    def create_cargo(self, req):
        req.validate()
        self.created = req
        return CargoResponse(id=42)


def _patch_client(monkeypatch, module, fake) -> None:
    monkeypatch.setattr(module, "make_client", lambda cfg, base_url_override=None: fake)
    monkeypatch.setattr(module, "load_config", config.default_config)


def test_help_lists_command_groups() -> None:
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    for name in ("config", "cargo", "refs", "contacts"):
        assert name in result.output


def test_refs_json_output(monkeypatch) -> None:
    fake = _FakeClient()
    _patch_client(monkeypatch, refs_cmd, fake)

    result = runner.invoke(main.app, ["refs", "currencies", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [{"id": 1, "name": "UAH"}, {"id": 2, "name": "EUR"}]
    assert fake.closed


def test_refs_lookup_by_name(monkeypatch) -> None:
    _patch_client(monkeypatch, refs_cmd, _FakeClient())

    result = runner.invoke(main.app, ["refs", "currencies", "--name", "EUR", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [{"id": 2, "name": "EUR"}]


def test_refs_lookup_miss_exits_nonzero(monkeypatch) -> None:
    _patch_client(monkeypatch, refs_cmd, _FakeClient())

    result = runner.invoke(main.app, ["refs", "currencies", "--name", "USD"])

    assert result.exit_code == 1


def test_refs_lookup_unsupported_kind(monkeypatch) -> None:
    _patch_client(monkeypatch, refs_cmd, _FakeClient())

    result = runner.invoke(main.app, ["refs", "units", "--name", "kg"])

    assert result.exit_code == 2
    assert "not supported" in result.output


def test_refs_unknown_kind(monkeypatch) -> None:
    _patch_client(monkeypatch, refs_cmd, _FakeClient())

    result = runner.invoke(main.app, ["refs", "planets"])

    assert result.exit_code == 2


def test_refs_client_error_exits_2(monkeypatch) -> None:
    fake = _FakeClient()
    _patch_client(monkeypatch, refs_cmd, fake)

    result = runner.invoke(main.app, ["refs", "units"])

    assert result.exit_code == 2
    assert "ERR" in result.output
    assert fake.closed


def test_contacts_json_output(monkeypatch) -> None:
    _patch_client(monkeypatch, contacts_cmd, _FakeClient())

    result = runner.invoke(main.app, ["contacts", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [{"contact_id": 7, "contact_name": "Olena"}]


def test_cargo_create_from_file(monkeypatch, tmp_path) -> None:
    fake = _FakeClient()
    _patch_client(monkeypatch, cargo_cmd, fake)
    path = tmp_path / "cargo.json"
    path.write_text(
        json.dumps(
            {
                "contentName": "Grain",
                "waypointListSource": [{"townName": "Kyiv"}],
                "waypointListTarget": [{"townName": "Lviv"}],
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(main.app, ["cargo", "create", str(path), "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"id": 42}
    assert fake.created.content_name == "Grain"


def test_cargo_create_without_target_fails(monkeypatch, tmp_path) -> None:
    fake = _FakeClient()
    _patch_client(monkeypatch, cargo_cmd, fake)
    path = tmp_path / "cargo.json"
    path.write_text(json.dumps({"waypointListSource": [{"townName": "Kyiv"}]}), encoding="utf-8")

    result = runner.invoke(main.app, ["cargo", "create", str(path)])

    assert result.exit_code == 2
    assert "waypointListTarget" in result.output
    assert fake.created is None


def test_cargo_create_invalid_json_file(monkeypatch, tmp_path) -> None:
    _patch_client(monkeypatch, cargo_cmd, _FakeClient())
    path = tmp_path / "cargo.json"
    path.write_text("{not json", encoding="utf-8")

    result = runner.invoke(main.app, ["cargo", "create", str(path)])

    assert result.exit_code == 2


def test_cargo_create_unauthorized(monkeypatch, tmp_path) -> None:
    class _Unauthorized(_FakeClient):
        def create_cargo(self, req):
            raise ApiError(401, "unauthorized", "bad key")

    _patch_client(monkeypatch, cargo_cmd, _Unauthorized())
    path = tmp_path / "cargo.json"
    path.write_text(
        json.dumps({"waypointListSource": [{"townName": "A"}], "waypointListTarget": [{"townName": "B"}]}),
        encoding="utf-8",
    )

    result = runner.invoke(main.app, ["cargo", "create", str(path)])

    assert result.exit_code == 2
    assert "Unauthorized" in result.output


def test_config_set_and_show(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)

    result = runner.invoke(main.app, ["config", "set", "--api-key", "abc", "--language", "ru"])
    assert result.exit_code == 0

    saved = config.load_config()
    assert saved.api_key == "abc"
    assert saved.language == "ru"

    result = runner.invoke(main.app, ["config", "show"])
    assert result.exit_code == 0
    assert "api_key=(set)" in result.output
    assert "language=ru" in result.output


def test_config_set_rejects_unknown_language(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))

    result = runner.invoke(main.app, ["config", "set", "--language", "de"])

    assert result.exit_code == 2
    assert not tmp_path.joinpath("config.toml").exists()
