'''
Lookup functions for the shell catalog. These accept either a
:class:`~ttshells.catalog.shellname.ShellName` or its name as string and
provide the radius based queries needed when labelling a sampled Earth model.

:copyright:
   The ttshells development team.
:license:
    EUROPEAN UNION PUBLIC LICENCE v. 1.2
   (https://joinup.ec.europa.eu/collection/eupl/eupl-text-eupl-12)

Created: Monday, 19th October 2026 10:05:37 am
Last Modified: Monday, 19th October 2026 04:12:18 pm
'''

import logging
from typing import List, Optional, Tuple, Union

import numpy as np

from ttshells.catalog.shellname import ShellEntry, ShellKind, ShellName
from ttshells.constants import R_EARTH


logger = logging.getLogger('ttshells.catalog')

NameLike = Union[ShellName, str]

# Layers from the centre outward
_LAYERS = tuple(n for n in ShellName if n.kind is ShellKind.LAYER)
_LAYER_TOPS = np.array([n.default_radius for n in _LAYERS])


def get_entry(name: NameLike) -> ShellEntry:
    """
    Return the full catalog record.

    :param name: Catalog member or its name
    :type name: ShellName or str
    :raises UnknownShellError: For names that are not in the catalog
    :return: The record
    :rtype: ShellEntry
    """
    return ShellName.from_name(name).entry


def get_default_radius(name: NameLike) -> float:
    """Default radius in km of the shell top or discontinuity."""
    return ShellName.from_name(name).default_radius


def get_temp_p_code(name: NameLike) -> Optional[str]:
    return ShellName.from_name(name).temp_p_code


def get_temp_s_code(name: NameLike) -> Optional[str]:
    return ShellName.from_name(name).temp_s_code


def names(kind: Optional[ShellKind] = None) -> Tuple[ShellName, ...]:
    """
    All members in catalog order.

    :param kind: Only return members of this kind, defaults to None
        (i.e., all members).
    :type kind: ShellKind, optional
    :return: The members
    :rtype: Tuple[ShellName, ...]
    """
    if kind is None:
        return tuple(ShellName)
    return tuple(n for n in ShellName if n.kind is ShellKind(kind))


def catalog() -> Tuple[ShellEntry, ...]:
    """All catalog records in catalog order."""
    return tuple(n.entry for n in ShellName)


def radii(kind: Optional[ShellKind] = None) -> np.ndarray:
    """
    Default radii in catalog order. The returned array is read-only.

    :param kind: Restrict to members of this kind, defaults to None
    :type kind: ShellKind, optional
    :return: Radii in km
    :rtype: np.ndarray
    """
    r = np.array([n.default_radius for n in names(kind)], dtype=float)
    r.flags.writeable = False
    return r


def entries_at_radius(r: float, atol: float = 1e-6) -> List[ShellName]:
    """
    Return all members whose default radius is ``r``. Coincident boundaries
    (e.g., the outer core top and the core-mantle boundary) are all returned.

    :param r: Radius in km
    :type r: float
    :param atol: Absolute tolerance in km, defaults to 1e-6
    :type atol: float, optional
    :return: Members in catalog order, empty if there is none.
    :rtype: List[ShellName]
    """
    return [
        n for n in ShellName if np.isclose(
            n.default_radius, r, rtol=0, atol=atol)]


def shell_for_radius(r: float) -> ShellName:
    """
    Find the layer of the default Earth model that a sample at radius ``r``
    belongs to. A sample exactly on a boundary belongs to the layer below.

    :param r: Radius in km
    :type r: float
    :raises ValueError: If r is negative, above the free surface or NaN.
    :return: The layer
    :rtype: ShellName
    """
    if not 0 <= r <= R_EARTH:
        raise ValueError(
            'Radius %s km is outside of the Earth model [0, %s].'
            % (r, R_EARTH))
    shell = _LAYERS[int(np.searchsorted(_LAYER_TOPS, r, side='left'))]
    logger.debug('Radius %s km assigned to %s.' % (r, shell.name))
    return shell


def discontinuity_at(r: float, atol: float = 1e-6) -> Optional[ShellName]:
    """
    Return the named discontinuity at radius ``r`` or None if there is no
    named discontinuity at that radius (e.g., the 410 km discontinuity).

    :param r: Radius in km
    :type r: float
    :param atol: Absolute tolerance in km, defaults to 1e-6
    :type atol: float, optional
    :return: The discontinuity or None
    :rtype: Optional[ShellName]
    """
    for n in entries_at_radius(r, atol=atol):
        if n.kind is ShellKind.DISCONTINUITY:
            return n
    logger.debug('No named discontinuity at %s km.' % r)
    return None

