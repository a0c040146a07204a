import json
import logging

import click
import yaml
from dacite import DaciteError

from infra_segment.lib.config import config_from_dict
from infra_segment.lib.segment import NetworkSegmentSpec, SegmentError, SegmentGraph, define


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def _load_graph(spec_file) -> SegmentGraph:
    try:
        data = yaml.safe_load(spec_file)
    except yaml.YAMLError as e:
        raise click.ClickException(f"{spec_file.name}: {e}")

    if not isinstance(data, dict):
        raise click.ClickException(f"{spec_file.name}: expected a mapping of segment fields")

    try:
        return define(config_from_dict(data, NetworkSegmentSpec))
    except (SegmentError, DaciteError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!", err=True)


@cli.command()
@click.argument("spec_file", type=click.File("r"))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Output format for the declaration graph",
)
def describe(spec_file, output_format):
    """Print the resource declarations for a segment spec file"""
    graph = _load_graph(spec_file)

    if output_format == "json":
        click.echo(json.dumps(graph.to_dict(), indent=2))
    else:
        click.echo(yaml.safe_dump(graph.to_dict(), sort_keys=False), nl=False)


@cli.command()
@click.argument("spec_file", type=click.File("r"))
def validate(spec_file):
    """Check that a segment spec file defines a valid segment"""
    graph = _load_graph(spec_file)

    subnet = graph[graph.subnet.name].properties
    echo_key_value("Subnet", f"{subnet['cidr_block']} ({subnet['availability_zone']})")
    echo_key_value("Routes", len(graph.routes))
    echo_key_value("Resources", len(graph))


def run():
    exit(cli())


if __name__ == "__main__":
    run()
