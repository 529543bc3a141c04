import click
from click.testing import CliRunner

from socket_deployment.options import required_confirmations_option, socket_address_option


@click.command()
@socket_address_option
@required_confirmations_option
def show(address, required_confirmations):
    click.echo(f"{address} {required_confirmations}")


def test_address_is_checksummed():
    result = CliRunner().invoke(
        show, ["--address", "0x52908400098527886e0f7030069857d2e4169ee7", "-rc", "2"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "0x52908400098527886E0F7030069857D2E4169EE7 2"


def test_options_are_optional():
    result = CliRunner().invoke(show, [])
    assert result.exit_code == 0
    assert result.output.strip() == "None None"


def test_invalid_address():
    result = CliRunner().invoke(show, ["--address", "0xHASH"])
    assert result.exit_code == 2
    assert "not a valid ethereum address" in result.output


def test_required_confirmations_must_be_positive():
    result = CliRunner().invoke(show, ["-rc", "0"])
    assert result.exit_code == 2
    assert "--required-confirmations" in result.output
