"""Tests for the command-line interface."""

import pytest

from moneroo_payments.cli import build_parser, run_cli


@pytest.fixture
def no_env(monkeypatch, tmp_path):
    for key in (
        "MONEROO_API_KEY",
        "MONEROO_API_URL",
        "MONEROO_TIMEOUT_SECONDS",
        "MONEROO_DEFAULT_METHOD",
    ):
        monkeypatch.delenv(key, raising=False)
    return str(tmp_path / "missing.env")


class TestMethodsCommand:
    def test_lists_payment_methods_for_country(self, capsys):
        assert run_cli(["methods", "--country", "bj"]) == 0
        out = capsys.readouterr().out
        assert "mtn_bj" in out
        assert "moov_bj" in out
        assert "wave_sn" not in out

    def test_lists_payout_methods_by_currency(self, capsys):
        assert run_cli(["methods", "--payout", "--currency", "XOF"]) == 0
        out = capsys.readouterr().out
        assert "djamo_sn" in out
        assert "moneroo_payout_demo" in out

    def test_no_match(self, capsys):
        assert run_cli(["methods", "--country", "ZZ"]) == 0
        assert capsys.readouterr().out == ""


class TestRequestCommands:
    def test_pay(self, no_env, session, make_response):
        session.request.return_value = make_response(
            200,
            {"message": "ok", "data": {"id": "tx_1", "checkout_url": "https://checkout/tx_1"}},
        )
        code = run_cli(
            [
                "--env-file", no_env,
                "--set", "MONEROO_API_KEY=sk_cli",
                "pay",
                "--amount", "1000",
                "--currency", "XOF",
                "--description", "Order 1",
                "--email", "a@example.com",
                "--first-name", "Ada",
                "--last-name", "Lovelace",
                "--return-url", "https://example.com/done",
                "--methods", "mtn_bj, moov_bj",
            ],
            session=session,
        )
        assert code == 0
        _, kwargs = session.request.call_args
        assert kwargs["json"]["methods"] == ["mtn_bj", "moov_bj"]
        assert kwargs["headers"]["Authorization"] == "Bearer sk_cli"

    def test_missing_api_key(self, no_env, session):
        assert run_cli(["--env-file", no_env, "status", "tx_1"], session=session) == 1
        session.request.assert_not_called()

    def test_status_api_error(self, no_env, session, make_response):
        session.request.return_value = make_response(404, {"message": "Not found"})
        code = run_cli(
            ["--env-file", no_env, "--set", "MONEROO_API_KEY=sk_cli", "status", "tx_1"],
            session=session,
        )
        assert code == 1

    def test_payout_validation_error(self, no_env, session):
        code = run_cli(
            [
                "--env-file", no_env,
                "--set", "MONEROO_API_KEY=sk_cli",
                "payout",
                "--amount", "500",
                "--currency", "XOF",
                "--description", "Refund",
                "--email", "a@example.com",
                "--first-name", "Ada",
                "--last-name", "Lovelace",
                "--method", "mtn_bj",
            ],
            session=session,
        )
        assert code == 1
        session.request.assert_not_called()

    def test_payout_details(self, no_env, session, make_response):
        session.request.return_value = make_response(
            200, {"message": "ok", "data": {"id": "po_1", "status": "pending"}}
        )
        code = run_cli(
            [
                "--env-file", no_env,
                "--set", "MONEROO_API_KEY=sk_cli",
                "payout-status", "po_1", "--details",
            ],
            session=session,
        )
        assert code == 0
        args, _ = session.request.call_args
        assert args[1].endswith("/payouts/po_1")


def test_parser_rejects_bad_override():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--set", "novalue", "methods"])
