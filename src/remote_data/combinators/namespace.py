"""Static-land style module dictionary for RemoteData."""

from __future__ import annotations

from typing import ClassVar

from remote_data.combinators import ops
from remote_data.kernel import variants


class SRD:
    """Every RemoteData operation gathered under one name.

    For code that passes a type's operations around as a single value,
    e.g. `def double_all(F, fa): return F.map(lambda x: x * 2, fa)`.
    Holds no state and adds no behavior.
    """

    URI: ClassVar[str] = "RemoteData"

    of = staticmethod(ops.of)
    map = staticmethod(ops.map)
    map2 = staticmethod(ops.map2)
    map3 = staticmethod(ops.map3)
    map_failure = staticmethod(ops.map_failure)
    bimap = staticmethod(ops.bimap)
    chain = staticmethod(ops.chain)
    ap = staticmethod(ops.ap)
    alt = staticmethod(ops.alt)
    equals = staticmethod(ops.equals)
    unwrap = staticmethod(ops.unwrap)
    unpack = staticmethod(ops.unpack)
    with_default = staticmethod(ops.with_default)
    match = staticmethod(ops.match)
    sequence = staticmethod(ops.sequence)
    traverse = staticmethod(ops.traverse)

    is_not_asked = staticmethod(variants.is_not_asked)
    is_loading = staticmethod(variants.is_loading)
    is_failure = staticmethod(variants.is_failure)
    is_success = staticmethod(variants.is_success)
