from __future__ import annotations

from typing import Any

from .registry import RegistryEntry


class PackageManifest(RegistryEntry):
    """Contents of an installed package's package.json.

    Unknown keys are kept (extra="allow"); ``version`` is the installed version.
    Fields whose shape varies between npm eras (``license`` as a string or a
    ``{"type": ...}`` object, ``main`` as a string or list) are left untyped.
    """

    main: Any = None
    license: Any = None
