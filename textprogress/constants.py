"""Constants used throughout the application."""

# Display defaults
DEFAULT_BAR_LENGTH = 20
DEFAULT_UPDATE_STEP = 10
DEFAULT_START_MESSAGE = 'Running: '
DEFAULT_END_MESSAGE = ' Done.'
DEFAULT_BAR_SYMBOL = '='
DEFAULT_EMPTY_BAR_SYMBOL = ' '

DEFAULT_OPTIONS = {
    'bar_length': DEFAULT_BAR_LENGTH,
    'update_step': DEFAULT_UPDATE_STEP,
    'start_message': DEFAULT_START_MESSAGE,
    'end_message': DEFAULT_END_MESSAGE,
    'show_bar': True,
    'show_percentage': True,
    'show_actual_num': False,
    'show_remaining_time': True,
    'show_final_time': True,
    'bar_symbol': DEFAULT_BAR_SYMBOL,
    'empty_bar_symbol': DEFAULT_EMPTY_BAR_SYMBOL,
}

# Shown while the remaining time cannot be estimated yet
REMAINING_TIME_PLACEHOLDER = ' --:--:--'

# Moves the cursor back one character
ERASE_CHAR = '\b'

# Config file keys (camelCase) to keyword options
CONFIG_FILE = 'textprogress.config.json'
CONFIG_KEYS = {
    'barLength': 'bar_length',
    'updateStep': 'update_step',
    'startMessage': 'start_message',
    'endMessage': 'end_message',
    'showBar': 'show_bar',
    'showPercentage': 'show_percentage',
    'showActualNum': 'show_actual_num',
    'showRemainingTime': 'show_remaining_time',
    'showFinalTime': 'show_final_time',
    'barSymbol': 'bar_symbol',
    'emptyBarSymbol': 'empty_bar_symbol',
}

# Delay per simulated step for the run and demo commands
DEFAULT_DELAY = 0.05
