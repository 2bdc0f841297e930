import logging
from colorama import Fore, Style, init

init(autoreset=True)

SEVERITY_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.MAGENTA
}

LOGGER_NAME = 'groupie_tracker'

_state = {'verbose': False}


def configure_logging(verbose=False):
    """Set the console verbosity and the level of the site logger"""
    _state['verbose'] = bool(verbose)
    logging.getLogger(LOGGER_NAME).setLevel(
        logging.DEBUG if verbose else logging.INFO)


def logger(message, severity='INFO'):
    severity = severity.upper()
    level = getattr(logging, severity, logging.INFO)
    # DEBUG lines only reach the console in verbose mode
    if level > logging.DEBUG or _state['verbose']:
        color = SEVERITY_COLORS.get(severity, Fore.WHITE)
        print(f"{color}[{severity}]{Style.RESET_ALL} {message}")
    logging.getLogger(LOGGER_NAME).log(level, message)
