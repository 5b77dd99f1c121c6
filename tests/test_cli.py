from unittest import mock

import toml
from click.testing import CliRunner

from countrytable import main as cli_module


@mock.patch.object(cli_module, "configure_logging")
@mock.patch.object(cli_module, "CountryTableApp")
def test_cli_passes_options_to_app(app_cls, configure_logging, tmp_path):
    path = tmp_path / "countrytable.config"
    path.write_text(toml.dumps({"page_size": 30, "timeout": 4.0}))

    result = CliRunner().invoke(
        cli_module.cli,
        ["--config", str(path), "--page-size", "20", "--theme", "nord", "--log-file", str(tmp_path / "log")],
    )

    assert result.exit_code == 0, result.output
    kwargs = app_cls.call_args.kwargs
    assert kwargs["page_size"] == 20
    assert kwargs["timeout"] == 4.0
    assert kwargs["theme"] == "nord"
    app_cls.return_value.run.assert_called_once_with()
    configure_logging.assert_called_once_with(str(tmp_path / "log"), "INFO")


@mock.patch.object(cli_module, "CountryTableApp")
def test_cli_reports_invalid_config(app_cls, tmp_path):
    path = tmp_path / "countrytable.config"
    path.write_text(toml.dumps({"endpoint_url": "gopher://old.test"}))

    result = CliRunner().invoke(cli_module.cli, ["--config", str(path)])

    assert result.exit_code != 0
    assert "Invalid endpoint_url" in result.output
    app_cls.assert_not_called()


def test_configure_writes_config(tmp_path):
    path = tmp_path / "countrytable.config"
    answers = "\n".join(["https://mirror.test/v2/all", "5", "25", "500", "3"]) + "\n"

    result = CliRunner().invoke(cli_module.cli, ["configure", "--config", str(path)], input=answers)

    assert result.exit_code == 0, result.output
    saved = toml.loads(path.read_text())
    assert saved["endpoint_url"] == "https://mirror.test/v2/all"
    assert saved["timeout"] == 5.0
    assert saved["page_size"] == 25
    assert saved["scroll_debounce_ms"] == 500
    assert saved["theme"] == "nord"
