"""Entry point for the textprogress command."""
import logging
import sys
import time
from typing import Any, Dict, List, Optional
from colorama import Fore, Style, just_fix_windows_console
from .cli import parse_arguments, merge_cli_options
from .config import configure_logging, read_config, options_from_config
from .constants import CONFIG_FILE
from .progress import create
from .validation import InvalidArgument

# Example configurations shown by the demo command
DEMO_SCENARIOS = [
    ("Simple bar (out of the box settings)", 150, {}),
    ("Customized configuration", 150, {
        'bar_length': 20,
        'update_step': 10,
        'start_message': 'Waiting... ',
        'end_message': ' Finally!',
        'show_bar': True,
        'show_remaining_time': True,
        'show_actual_num': True,
        'bar_symbol': '+',
        'empty_bar_symbol': '-',
    }),
    ("We can even hide the progress bar", 300, {
        'bar_length': 20,
        'update_step': 20,
        'start_message': 'Completed ',
        'end_message': ' Done.',
        'show_bar': False,
        'show_remaining_time': True,
        'show_actual_num': False,
        'bar_symbol': '+',
        'empty_bar_symbol': '-',
    }),
]

def simulate(total: int, delay: float, options: Dict[str, Any]) -> None:
    """Advance a progress indicator through total steps, sleeping between them."""
    indicator = create(total, **options)
    for i in range(1, total + 1):
        time.sleep(delay)
        indicator.advance(i)

def run_demo(delay: float) -> None:
    """Run every example configuration in turn."""
    for number, (title, total, options) in enumerate(DEMO_SCENARIOS, start=1):
        sys.stdout.write(f"{Fore.CYAN}Example {number}: {title}{Style.RESET_ALL}\n")
        sys.stdout.flush()
        simulate(total, delay, options)

def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the textprogress tool."""
    # Parse command-line arguments
    args = parse_arguments(argv)
    
    # Configure logging
    configure_logging(args.debug)
    just_fix_windows_console()
    
    # Read config and merge with CLI options
    config = read_config(args.config or CONFIG_FILE)
    config = merge_cli_options(args, config)
    
    try:
        if args.command == 'run':
            simulate(args.total, args.delay, options_from_config(config))
        elif args.command == 'demo':
            run_demo(args.delay)
    except InvalidArgument as e:
        logging.error(str(e))
        return 2
    return 0

if __name__ == '__main__':
    sys.exit(main())
