"""
Command-Line Interface for Mock Data Generator

Provides commands for:
- generate: Generate mock records as JSON or CSV
- metrics: Show dataset metrics for an entity kind
- config: Manage configurations
"""

import argparse
import sys
import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from mockgen.config import ConfigLoader, ConfigValidator, get_default_config
from mockgen.generators import supported_types
from mockgen.orchestrator import DataOrchestrator, get_dataset_metrics
from mockgen.utils import FileHandler, PathManager, infer_format, setup_logging

# Generated output goes to stdout, status messages to stderr
console = Console(stderr=True)
output_console = Console()


class CLI:
    """Main CLI class"""

    def __init__(self):
        self.parser = self._create_parser()
        self.config_loader = ConfigLoader()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            description="Mock Data Generator CLI",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Print ten users as JSON
  python cli.py generate --type user --count 10

  # Write users to a CSV file (format inferred from the extension)
  python cli.py generate -n 500 -o users.csv

  # Use preset configuration
  python cli.py generate --preset csv_export

  # Show dataset metrics
  python cli.py metrics user
            """
        )

        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable verbose output'
        )

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # Generate command
        generate_parser = subparsers.add_parser('generate', help='Generate mock data')
        generate_parser.add_argument('--type', '-t', dest='entity_type', help='Entity kind (e.g. user)')
        generate_parser.add_argument('--count', '-n', type=int, help='Number of records to generate')
        generate_parser.add_argument('--format', '-f', help='Output format: json or csv')
        generate_parser.add_argument('--seed', '-s', help='Seed label (recorded, does not affect output)')
        generate_parser.add_argument('--locale', help='Locale label (recorded, does not affect output)')
        generate_parser.add_argument('--preset', '-p', help='Configuration preset')
        generate_parser.add_argument('--config', '-c', help='Custom configuration file')
        generate_parser.add_argument('--output', '-o', help='Output file (stdout if omitted)')
        generate_parser.add_argument('--pretty', action='store_true', help='Indent JSON output')

        # Metrics command
        metrics_parser = subparsers.add_parser('metrics', help='Show dataset metrics')
        metrics_parser.add_argument('entity_type', help='Entity kind')

        # Config command
        config_parser = subparsers.add_parser('config', help='Manage configurations')
        config_subparsers = config_parser.add_subparsers(dest='config_command')

        config_subparsers.add_parser('list', help='List available presets')

        show_parser = config_subparsers.add_parser('show', help='Show preset configuration')
        show_parser.add_argument('preset', help='Preset name')

        create_parser = config_subparsers.add_parser('create', help='Create custom configuration')
        create_parser.add_argument('output', help='Output configuration file')

        return parser

    def run(self, args=None) -> int:
        """Run CLI"""
        args = self.parser.parse_args(args)

        log_level = logging.DEBUG if args.verbose else logging.WARNING
        setup_logging(level=log_level)

        if args.command == 'generate':
            return self.cmd_generate(args)
        elif args.command == 'metrics':
            return self.cmd_metrics(args)
        elif args.command == 'config':
            return self.cmd_config(args)

        self.parser.print_help()
        return 0

    def _error(self, args, error: Exception) -> int:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(error))}")
        if args.verbose:
            console.print_exception()
        return 1

    def cmd_generate(self, args) -> int:
        """Generate mock data"""
        try:
            # Load configuration: preset, then custom file, then flags
            config = get_default_config()
            if args.preset:
                config = self.config_loader.load_preset(args.preset)
                console.print(f"✓ Loaded preset: {args.preset}")
            if args.config:
                config = self.config_loader.merge_configs(config, FileHandler.read_config(args.config))
                console.print(f"✓ Loaded custom configuration: {args.config}")

            config = self.config_loader.merge_configs(config, self._flag_overrides(args, config))

            is_valid, errors = ConfigValidator.validate(config)
            if not is_valid:
                raise ValueError("; ".join(errors))

            setup_logging(
                level=logging.DEBUG if args.verbose else config.logging.level,
                log_file=config.logging.log_file,
            )

            orchestrator = DataOrchestrator(config)
            result = orchestrator.generate(config.to_request())

            output_path = self._output_path(args.output, config)
            if output_path is None:
                output_console.out(result.output, highlight=False)
                return 0

            FileHandler.write_text(result.output, output_path)

            table = Table(title="Generation Summary", show_header=True)
            table.add_column("Metric", style="cyan")
            table.add_column("Value", style="green")

            table.add_row("Entity Type", result.metadata['entity_type'])
            table.add_row("Records Generated", f"{len(result.records):,}")
            table.add_row("Format", result.format)
            table.add_row("Seed", config.generation.seed or "Random")
            table.add_row("Output File", str(output_path))

            console.print(table)
            console.print("\n[bold green]✓ Generation complete![/bold green]")
            return 0

        except Exception as e:
            return self._error(args, e)

    def _flag_overrides(self, args, config) -> dict:
        """Collect the settings given on the command line"""
        generation = {}
        if args.entity_type:
            generation['entity_type'] = args.entity_type
        if args.count is not None:
            generation['count'] = args.count
        if args.format:
            generation['format'] = args.format
        elif args.output:
            generation['format'] = infer_format(args.output, config.generation.format)
        if args.seed:
            generation['seed'] = args.seed
        if args.locale:
            generation['locale'] = args.locale

        output = {'pretty': True} if args.pretty else {}

        return {'generation': generation, 'output': output}

    def _output_path(self, output: Optional[str], config):
        if output:
            return output

        if config.output.output_dir:
            directory = PathManager.ensure_dir(config.output.output_dir)
            return PathManager.get_unique_filename(
                directory,
                f"mock_{config.generation.entity_type.lower()}",
                infer_extension(config.generation.format),
            )

        return None

    def cmd_metrics(self, args) -> int:
        """Show dataset metrics"""
        output_console.print_json(get_dataset_metrics(args.entity_type))
        return 0

    def cmd_config(self, args) -> int:
        """Manage configurations"""
        console.print(Panel.fit(
            "⚙️ [bold]Configuration Management[/bold]",
            border_style="magenta"
        ))

        try:
            if args.config_command == 'list':
                presets = self.config_loader.list_presets()

                table = Table(title="Available Presets", show_header=True)
                table.add_column("Preset", style="cyan")
                table.add_column("Description", style="white")

                descriptions = {
                    'default': 'Ten users as compact JSON',
                    'csv_export': 'A thousand users as CSV in outputs/',
                    'demo': 'Five users as indented JSON',
                }

                for preset in presets:
                    table.add_row(preset, descriptions.get(preset, 'Custom preset'))

                console.print(table)
                console.print(f"Supported entity types: {', '.join(supported_types())}")

            elif args.config_command == 'show':
                config = self.config_loader.load_preset(args.preset)

                console.print(f"\n[bold]Preset: {args.preset}[/bold]\n")
                output_console.print_json(data=config.to_dict())

            elif args.config_command == 'create':
                config = get_default_config()
                self.config_loader.save_config(config, args.output)

                console.print(f"✓ Created configuration file: {args.output}")
                console.print("  Edit this file to customize settings")

            else:
                console.print("Use 'config list', 'config show <preset>', or 'config create <file>'")

            return 0

        except Exception as e:
            return self._error(args, e)


def infer_extension(fmt: str) -> str:
    return '.csv' if fmt.lower() == 'csv' else '.json'


def main():
    """CLI entry point"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
