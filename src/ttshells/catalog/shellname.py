'''
Names for the shells and discontinuities of the Earth model. Handy for
labelling the voluminous output of the travel-time table construction.

:copyright:
   The ttshells development team.
:license:
    EUROPEAN UNION PUBLIC LICENCE v. 1.2
   (https://joinup.ec.europa.eu/collection/eupl/eupl-text-eupl-12)

Created: Monday, 19th October 2026 09:20:11 am
Last Modified: Monday, 19th October 2026 03:47:52 pm
'''

from enum import Enum
import logging
from typing import NamedTuple, Optional

from ttshells.constants import KM2DEG, R_EARTH, TARGET_RANGE_INCREMENTS


logger = logging.getLogger('ttshells.catalog')

# Member attributes that cannot be rebound once set
_FROZEN = ('_entry', '_kind')


class UnknownShellError(KeyError):
    """Raised, when a shell name is requested that is not in the catalog."""

    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return 'Unknown shell name: %r' % (self.value,)


class ShellKind(Enum):
    LAYER = 'layer'
    DISCONTINUITY = 'discontinuity'
    PLACEHOLDER = 'placeholder'


class ShellEntry(NamedTuple):
    """
    One immutable catalog record. A temporary phase code of ``''`` is defined
    but blank, ``None`` means the code is not meaningful for the entry.
    """
    name: str
    default_radius: float
    temp_p_code: Optional[str]
    temp_s_code: Optional[str]


class ShellName(Enum):
    """
    Closed catalog of Earth model shells, discontinuities and placeholders.

    Members carry their default radius (top of the shell or radius of the
    discontinuity in km) and the temporary P- and S-wave phase codes used
    while the travel-time tables are built. Several members share a radius,
    they are nonetheless distinct members.
    """
    # Placeholder for integrals bottoming at all source depths
    CENTER = (0., '', '', ShellKind.PLACEHOLDER)

    # Shells, the radius is the top of the shell
    INNER_CORE = (1217., 'tPKPdf', 'tSKSdf', ShellKind.LAYER)
    OUTER_CORE = (3482., 'tPKPab', 'tSKSab', ShellKind.LAYER)
    # to the 410 km discontinuity
    LOWER_MANTLE = (5961., 'tP', 'tS', ShellKind.LAYER)
    # to the Moho
    UPPER_MANTLE = (6336., 'tPn', 'tSn', ShellKind.LAYER)
    # to the Conrad
    LOWER_CRUST = (6351., 'tPb', 'tSb', ShellKind.LAYER)
    # to the free surface, i.e., the mean radius of the Earth
    UPPER_CRUST = (6371., 'tPg', 'tSg', ShellKind.LAYER)

    # Discontinuities
    INNER_CORE_BOUNDARY = (1217., 'rPKiKP', 'rSKiKS', ShellKind.DISCONTINUITY)
    CORE_MANTLE_BOUNDARY = (3482., '', 'rScS', ShellKind.DISCONTINUITY)
    MOHO_DISCONTINUITY = (6336., 'rPmP', 'rSmS', ShellKind.DISCONTINUITY)
    CONRAD_DISCONTINUITY = (6351., None, None, ShellKind.DISCONTINUITY)
    SURFACE = (6371., '', '', ShellKind.PLACEHOLDER)

    # Maximum slowness in the core. Careful, P drops and S increases here.
    CORE_TOP = (3482., '', '', ShellKind.PLACEHOLDER)
    # Minimum slowness at the base of the mantle
    MANTLE_BOTTOM = (3482., '', '', ShellKind.PLACEHOLDER)

    def __new__(cls, default_radius, temp_p_code, temp_s_code, kind):
        # The value is the position in the catalog. Members with identical
        # fields (CORE_TOP, MANTLE_BOTTOM) would otherwise become aliases.
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__)
        return obj

    def __init__(self, default_radius, temp_p_code, temp_s_code, kind):
        # _name_ is already set when the members are initialised
        self._entry = ShellEntry(
            self._name_, default_radius, temp_p_code, temp_s_code)
        self._kind = kind

    def __setattr__(self, key, value):
        if key in _FROZEN and key in self.__dict__:
            raise AttributeError(
                'Shell %s is read-only.' % self.__dict__['_name_'])
        super().__setattr__(key, value)

    def __delattr__(self, key):
        if key in _FROZEN:
            raise AttributeError(
                'Shell %s is read-only.' % self.__dict__['_name_'])
        super().__delattr__(key)

    def __repr__(self):
        return '<%s.%s>' % (self.__class__.__name__, self.name)

    @property
    def entry(self) -> ShellEntry:
        return self._entry

    @property
    def default_radius(self) -> float:
        """Default radius of the top of the shell in km."""
        return self._entry.default_radius

    @property
    def temp_p_code(self) -> Optional[str]:
        """Temporary P-wave phase code, possibly ``''`` or None."""
        return self._entry.temp_p_code

    @property
    def temp_s_code(self) -> Optional[str]:
        """Temporary S-wave phase code, possibly ``''`` or None."""
        return self._entry.temp_s_code

    @property
    def kind(self) -> ShellKind:
        return self._kind

    @property
    def default_depth(self) -> float:
        """Depth of the default radius below the surface in km."""
        return R_EARTH - self.default_radius

    @property
    def range_increment(self) -> Optional[float]:
        """
        Target travel distance increment in km for sampling rays in this
        shell. A discontinuity uses the increment of the shell directly
        above it. None for placeholders.
        """
        try:
            return TARGET_RANGE_INCREMENTS[_INCREMENT_INDEX[self.name]]
        except KeyError:
            return None

    @property
    def range_increment_deg(self) -> Optional[float]:
        """Same as :attr:`range_increment`, but in degrees at the surface."""
        delx = self.range_increment
        if delx is None:
            return None
        return delx*KM2DEG

    @classmethod
    def from_name(cls, name: str) -> 'ShellName':
        """
        Return the member for a name. Case and surrounding whitespace are
        ignored.

        :param name: Shell name, e.g. ``'moho_discontinuity'``
        :type name: str
        :raises UnknownShellError: If the name is not in the catalog.
        :return: The catalog member
        :rtype: ShellName
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            logger.debug('Shell lookup with non-string key %r.' % (name,))
            raise UnknownShellError(name)
        try:
            return cls[name.strip().upper()]
        except KeyError:
            logger.debug('Shell %r is not in the catalog.' % name)
            raise UnknownShellError(name) from None


# Index into TARGET_RANGE_INCREMENTS
_INCREMENT_INDEX = {
    'INNER_CORE': 0,
    'OUTER_CORE': 1,
    'LOWER_MANTLE': 2,
    'UPPER_MANTLE': 3,
    'LOWER_CRUST': 4,
    'UPPER_CRUST': 5,
    'INNER_CORE_BOUNDARY': 1,
    'CORE_MANTLE_BOUNDARY': 2,
    'MOHO_DISCONTINUITY': 4,
    'CONRAD_DISCONTINUITY': 5}
