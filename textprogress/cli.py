"""Module for handling command-line arguments."""
import argparse
from typing import List, Dict, Any, Optional
from .constants import DEFAULT_DELAY

def non_negative_float(value: str) -> float:
    """Argument type accepting floats that are zero or greater."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number

def _add_display_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the flags controlling how the progress line looks."""
    parser.add_argument('--bar-length', type=int, help='Width of the bar interior')
    parser.add_argument('--update-step', type=int, help='Minimum number of steps between redraws')
    parser.add_argument('--start-message', help='Text shown before the bar')
    parser.add_argument('--end-message', help='Text shown after completion')
    parser.add_argument('--bar-symbol', help='Character for the completed part of the bar')
    parser.add_argument('--empty-bar-symbol', help='Character for the remaining part of the bar')
    
    parser.add_argument('--no-bar', dest='show_bar', action='store_false', default=None,
                        help='Hide the bar')
    parser.add_argument('--no-percentage', dest='show_percentage', action='store_false', default=None,
                        help='Hide the percentage')
    parser.add_argument('--actual-num', dest='show_actual_num', action='store_true', default=None,
                        help='Show the number of completed steps')
    parser.add_argument('--no-remaining-time', dest='show_remaining_time', action='store_false', default=None,
                        help='Hide the remaining time estimate')
    parser.add_argument('--no-final-time', dest='show_final_time', action='store_false', default=None,
                        help='Hide the total running time on completion')

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.
    
    Args:
        argv: List of command-line arguments (defaults to sys.argv[1:])
        
    Returns:
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        prog='textprogress',
        description='Render a single-line text progress bar for long-running tasks.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    
    parser.add_argument(
        '--config',
        help='Path to a JSON configuration file (defaults to textprogress.config.json)'
    )
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    run_parser = subparsers.add_parser('run', help='Simulate a task with the given number of steps')
    run_parser.add_argument('total', type=int, help='Number of steps')
    run_parser.add_argument('--delay', type=non_negative_float, default=DEFAULT_DELAY,
                            help='Seconds to wait per step')
    _add_display_arguments(run_parser)
    
    demo_parser = subparsers.add_parser('demo', help='Show the example progress bar configurations')
    demo_parser.add_argument('--delay', type=non_negative_float, default=DEFAULT_DELAY,
                             help='Seconds to wait per step')
    
    return parser.parse_args(argv)

def merge_cli_options(args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge command-line arguments into configuration.
    
    Args:
        args: Parsed command-line arguments
        config: Configuration dictionary
        
    Returns:
        Updated configuration dictionary
    """
    overrides = {
        'barLength': getattr(args, 'bar_length', None),
        'updateStep': getattr(args, 'update_step', None),
        'startMessage': getattr(args, 'start_message', None),
        'endMessage': getattr(args, 'end_message', None),
        'barSymbol': getattr(args, 'bar_symbol', None),
        'emptyBarSymbol': getattr(args, 'empty_bar_symbol', None),
        'showBar': getattr(args, 'show_bar', None),
        'showPercentage': getattr(args, 'show_percentage', None),
        'showActualNum': getattr(args, 'show_actual_num', None),
        'showRemainingTime': getattr(args, 'show_remaining_time', None),
        'showFinalTime': getattr(args, 'show_final_time', None),
    }
    # Only flags given on the command line override the config file
    config.update({key: value for key, value in overrides.items() if value is not None})

    return config
