'''
:copyright:
   The ttshells development team.
:license:
    EUROPEAN UNION PUBLIC LICENCE v. 1.2
   (https://joinup.ec.europa.eu/collection/eupl/eupl-text-eupl-12)

Created: Monday, 19th October 2026 11:02:19 am
Last Modified: Monday, 19th October 2026 01:44:56 pm
'''

import logging
from typing import Optional


log_lvl = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR}

FMT = "%(asctime)s %(levelname)-8s %(message)s"


def start_logger_if_necessary(
        name: str = 'ttshells', logfile: Optional[str] = None,
        loglvl: int or str = logging.WARNING) -> logging.Logger:
    """
    Initialise a logger. Handlers are only added if the logger does not
    have any yet, so calling this repeatedly is safe.

    :param name: The logger's name, defaults to 'ttshells'
    :type name: str, optional
    :param logfile: File to log to. If None, only log to the console.
    :type logfile: str, optional
    :param loglvl: Log level, either as int or as one of CRITICAL, ERROR,
        WARNING, INFO, or DEBUG. Defaults to WARNING.
    :type loglvl: int or str, optional
    :return: the logger
    :rtype: logging.Logger
    """
    if isinstance(loglvl, str):
        loglvl = log_lvl[loglvl.upper()]
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(loglvl)
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(FMT))
        logger.addHandler(sh)
        if logfile is not None:
            fh = logging.FileHandler(logfile, mode='w')
            fh.setFormatter(logging.Formatter(FMT))
            logger.addHandler(fh)
    return logger
