import pytest

from myecom import manage


class TestManageCli:
    def test_setup_db_without_relational_provider_is_a_no_op(self):
        manage.main(["setup-db"])

    def test_drop_db_without_relational_provider_is_a_no_op(self):
        manage.main(["drop-db"])

    def test_serve_runs_the_app_factory(self, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

        manage.main(["serve", "--port", "9000"])

        assert calls == [
            ("myecom.app:create_app", {"factory": True, "host": "127.0.0.1", "port": 9000, "reload": False})
        ]

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            manage.main([])
