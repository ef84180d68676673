import logging

import colorama
from colorama import Fore, Style


class ColoredFormatter(logging.Formatter):
    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.WHITE + Style.BRIGHT + Fore.RED,
    }

    def format(self, record):
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, Fore.WHITE)
        pad = ' ' * (8 - len(record.levelname))
        record.levelname = '[{}{}{}]{}'.format(
            color, record.levelname, Style.RESET_ALL, pad)

        return super().format(record)


def configure(level=logging.INFO, stream=None):
    colorama.just_fix_windows_console()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter('%(levelname)s %(message)s'))

    logger = logging.getLogger('signpost')
    logger.setLevel(level)
    logger.handlers[:] = [handler]

    return logger
