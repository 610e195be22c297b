from ttshells.catalog.shellname import (  # noqa: F401
    ShellEntry, ShellKind, ShellName, UnknownShellError)
from ttshells.catalog.lookup import (  # noqa: F401
    catalog, discontinuity_at, entries_at_radius, get_default_radius,
    get_entry, get_temp_p_code, get_temp_s_code, names, radii,
    shell_for_radius)
