'''
Named shells and discontinuities of the Earth model used when building
travel-time tables.

:copyright:
   The ttshells development team.
:license:
    EUROPEAN UNION PUBLIC LICENCE v. 1.2
   (https://joinup.ec.europa.eu/collection/eupl/eupl-text-eupl-12)
'''
from ttshells.catalog import (  # noqa: F401
    ShellEntry, ShellKind, ShellName, UnknownShellError)

__version__ = '0.1.0'
