"""Main entry point for the railway PNR status report"""
import json
import logging
import sys

import click
from pydantic import ValidationError

from src.models.config import Config
from src.models.report import PnrReport
from src.processing.pipeline import process_railway_pnr
from src.utils.output import render_report_text, report_to_json

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    """Configure logging level based on debug flag"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True  # Override any existing configuration
    )


@click.command()
@click.option('--input', 'input_path', required=True,
              help='Path to a PNR JSON document')
@click.option('--format', 'output_format', default='text',
              type=click.Choice(['text', 'json'], case_sensitive=False),
              help='Console output format (default: text)')
@click.option('-d', '--debug', is_flag=True,
              help='Enable debug logging for detailed output')
def main(input_path: str, output_format: str, debug: bool):
    """
    Railway PNR Status - Print a formatted status report for one PNR.

    Reads a PNR record (pnr, train, classBooked, passengers) from a JSON file,
    classifies every passenger and prints the report with summary counts.
    """
    configure_logging(debug=debug)

    try:
        config = create_application_config(input_path=input_path, output_format=output_format)

        pnr_data = load_pnr_data(config.input_path)
        report = process_railway_pnr(pnr_data)

        if report is None:
            logger.error(f"Invalid PNR data in {config.input_path}")
            sys.exit(1)

        display_report(report, config)

    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Error during processing: {e}", exc_info=debug)
        sys.exit(1)


def create_application_config(input_path: str, output_format: str) -> Config:
    """
    Create and validate application configuration from command-line arguments.

    Args:
        input_path: Path to the PNR JSON document
        output_format: "text" or "json"

    Returns:
        Validated Config object
    """
    return Config(input_path=input_path, output_format=output_format)


def load_pnr_data(input_path: str):
    """Read and decode a PNR JSON document"""
    with open(input_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    logger.debug(f"Loaded PNR data from {input_path}")
    return data


def display_report(report: PnrReport, config: Config) -> None:
    """
    Print the report to the console.

    Args:
        report: Report to print
        config: Application configuration
    """
    if config.is_json_output:
        click.echo(report_to_json(report))
    else:
        click.echo(render_report_text(report))


if __name__ == '__main__':
    main()
