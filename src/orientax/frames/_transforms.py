"""Rotations between reference frames.

The supported frames form a graph whose edges are elementary rotations:

- ICRF -> MOD(sys): bias-precession matrix of the convention.
- MOD(sys) -> TOD(sys): nutation matrix, with the celestial pole offsets.
- TOD(sys) -> PEF(sys): Greenwich apparent sidereal time.
- PEF(sys) -> ITRF: polar motion.
- TOD(IERS1996) -> TEME: IAU 1994 equation of the equinoxes.
- ICRF -> CIRF: CIP coordinates and CIO locator (IAU 2006/2000A).
- CIRF -> TIRF: Earth rotation angle.
- TIRF -> ITRF: polar motion with the TIO locator.
- ICRF -> IAU(body): IAU rotational elements.

Each edge is traversed backwards by transposing it.  :func:`rotation`
composes the edges along the shortest path between two frames, so the
ITRF is reached from the ICRF through the CIO-based chain.

Earth orientation inputs come from a
:class:`~orientax.frames.RotationProvider`.  Without one, the celestial
pole offsets and polar motion are zero and any leg that needs UT1 raises
:class:`~orientax.errors.RotationError`.

Typical usage::

    from orientax.eop import load_default_eop
    from orientax.frames import ICRF, ITRF, rotation

    rot = rotation(ICRF, ITRF, time, load_default_eop())
    r_itrf, v_itrf = rot.rotate_state(r_icrf, v_icrf)
"""

from __future__ import annotations

import functools
import logging
from collections import deque
from collections.abc import Callable
from itertools import pairwise

from orientax.constants import ROTATION_RATE_EARTH
from orientax.errors import (
    EopError,
    IncompatibleReferenceSystemsError,
    MissingEopProviderError,
    RotationError,
    UndefinedOriginPropertyError,
    UnknownFrameError,
    UtcError,
)
from orientax.frames._frames import CIRF, ICRF, ITRF, TEME, TIRF, Frame, FrameKind
from orientax.frames._iau import icrf_to_iau
from orientax.frames._providers import DefaultRotationProvider, RotationProvider
from orientax.frames._rotation import Rotation
from orientax.iers import (
    CipCoords,
    Corrections,
    PoleCoords,
    ReferenceSystem,
    cio_locator_iau2006,
    earth_rotation_angle,
    equation_of_the_equinoxes_iau1994,
)
from orientax.rotation_matrices import Rz
from orientax.time import Time, TimeScale

logger = logging.getLogger(__name__)

_EARTH_ANGULAR_VELOCITY = (0.0, 0.0, ROTATION_RATE_EARTH)

# ---------------------------------------------------------------------------
# Provider access
# ---------------------------------------------------------------------------


def _provider(provider: RotationProvider | None) -> RotationProvider:
    return DefaultRotationProvider() if provider is None else provider


def _to_scale(time: Time, scale: TimeScale, provider: RotationProvider) -> Time:
    try:
        return time.try_to_scale(scale, provider)
    except (MissingEopProviderError, EopError, UtcError) as err:
        raise RotationError("offset", str(err)) from err


def _corrections(time: Time, system: ReferenceSystem, provider: RotationProvider) -> Corrections:
    try:
        return provider.corrections(time, system)
    except (EopError, UtcError) as err:
        raise RotationError("eop", str(err)) from err


def _pole_coords(time: Time, provider: RotationProvider) -> PoleCoords:
    try:
        return provider.pole_coords(time)
    except (EopError, UtcError) as err:
        raise RotationError("eop", str(err)) from err


# ---------------------------------------------------------------------------
# Equinox-based chain
# ---------------------------------------------------------------------------


def icrf_to_mod(
    time: Time,
    system: ReferenceSystem = ReferenceSystem.IERS1996,
    provider: RotationProvider | None = None,
) -> Rotation:
    """Rotation from the ICRF to the mean equator and equinox of date."""
    tt = _to_scale(time, TimeScale.TT, _provider(provider))
    return Rotation.new(system.bias_precession_matrix(tt))


def mod_to_tod(
    time: Time,
    system: ReferenceSystem = ReferenceSystem.IERS1996,
    provider: RotationProvider | None = None,
) -> Rotation:
    """Rotation from the mean to the true equator and equinox of date."""
    provider = _provider(provider)
    tdb = _to_scale(time, TimeScale.TDB, provider)
    corrections = _corrections(time, system, provider)
    return Rotation.new(system.nutation_matrix(tdb, corrections))


def tod_to_pef(
    time: Time,
    system: ReferenceSystem = ReferenceSystem.IERS1996,
    provider: RotationProvider | None = None,
) -> Rotation:
    """Rotation from the true equator and equinox of date to the PEF.

    Raises:
        RotationError: If UT1 is unavailable.
    """
    provider = _provider(provider)
    tt = _to_scale(time, TimeScale.TT, provider)
    ut1 = _to_scale(time, TimeScale.UT1, provider)
    corrections = _corrections(time, system, provider)
    m = system.earth_rotation(tt, ut1, corrections)
    return Rotation.new(m).with_angular_velocity(_EARTH_ANGULAR_VELOCITY)


def pef_to_itrf(
    time: Time,
    system: ReferenceSystem = ReferenceSystem.IERS1996,
    provider: RotationProvider | None = None,
) -> Rotation:
    """Polar motion from the PEF to the ITRF."""
    provider = _provider(provider)
    tt = _to_scale(time, TimeScale.TT, provider)
    pole = _pole_coords(time, provider)
    return Rotation.new(system.polar_motion_matrix(tt, pole))


def tod_to_teme(time: Time, provider: RotationProvider | None = None) -> Rotation:
    """Rotation from the IERS 1996 true of date frame to TEME.

    TEME shares the true equator and places its x-axis at the mean
    equinox, offset from the true equinox by the IAU 1994 equation of the
    equinoxes.
    """
    tdb = _to_scale(time, TimeScale.TDB, _provider(provider))
    return Rotation.new(Rz(equation_of_the_equinoxes_iau1994(tdb.centuries_since_j2000())))


# ---------------------------------------------------------------------------
# CIO-based chain
# ---------------------------------------------------------------------------


def icrf_to_cirf(time: Time, provider: RotationProvider | None = None) -> Rotation:
    """Rotation from the ICRF to the CIRF (IAU 2006/2000A).

    The celestial pole offsets dX, dY of the provider are applied where
    available; without them the uncorrected CIP is used.
    """
    provider = _provider(provider)
    tdb = _to_scale(time, TimeScale.TDB, provider)
    t = tdb.centuries_since_j2000()
    xy = CipCoords.iau2006(t)
    s = cio_locator_iau2006(t, xy.x, xy.y)
    try:
        xy = xy + provider.corrections(time, ReferenceSystem.IERS2010)
    except (EopError, UtcError) as err:
        logger.debug("No celestial pole offsets at %s: %s", time, err)
    return Rotation.new(xy.celestial_to_intermediate_matrix(s))


def cirf_to_tirf(time: Time, provider: RotationProvider | None = None) -> Rotation:
    """Earth rotation angle from the CIRF to the TIRF.

    Raises:
        RotationError: If UT1 is unavailable.
    """
    ut1 = _to_scale(time, TimeScale.UT1, _provider(provider))
    m = Rz(earth_rotation_angle(ut1.days_since_j2000()))
    return Rotation.new(m).with_angular_velocity(_EARTH_ANGULAR_VELOCITY)


def tirf_to_itrf(time: Time, provider: RotationProvider | None = None) -> Rotation:
    """Polar motion from the TIRF to the ITRF, including the TIO locator."""
    return pef_to_itrf(time, ReferenceSystem.IERS2010, provider)


# ---------------------------------------------------------------------------
# Frame graph
# ---------------------------------------------------------------------------

_SYSTEMS = tuple(ReferenceSystem)


def _neighbours(frame: Frame) -> tuple[Frame, ...]:
    kind = frame.kind
    if kind is FrameKind.ICRF:
        return (CIRF, *(Frame.mod(s) for s in _SYSTEMS))
    if kind is FrameKind.CIRF:
        return (ICRF, TIRF)
    if kind is FrameKind.TIRF:
        return (CIRF, ITRF)
    if kind is FrameKind.ITRF:
        return (TIRF, *(Frame.pef(s) for s in _SYSTEMS))
    if kind is FrameKind.MOD:
        return (ICRF, Frame.tod(frame.system))
    if kind is FrameKind.TOD:
        neighbours = (Frame.mod(frame.system), Frame.pef(frame.system))
        if frame.system is ReferenceSystem.IERS1996:
            neighbours = (*neighbours, TEME)
        return neighbours
    if kind is FrameKind.PEF:
        return (Frame.tod(frame.system), ITRF)
    if kind is FrameKind.TEME:
        return (Frame.tod(ReferenceSystem.IERS1996),)
    return (ICRF,)


def _check_route(origin: Frame, target: Frame) -> None:
    for frame in (origin, target):
        if frame.kind is FrameKind.IAU and not frame.body.has_rotational_elements:
            raise UndefinedOriginPropertyError(frame.body.title, "rotational elements")
    if (
        origin.is_equinox_based
        and target.is_equinox_based
        and origin.system is not target.system
    ):
        raise IncompatibleReferenceSystemsError(
            f"cannot rotate between {origin} and {target}: "
            "frames of different IERS conventions"
        )


@functools.lru_cache(maxsize=256)
def route(origin: Frame, target: Frame) -> tuple[Frame, ...]:
    """Shortest chain of frames from *origin* to *target*, both included.

    Raises:
        UndefinedOriginPropertyError: If an IAU frame's body has no
            rotational elements.
        IncompatibleReferenceSystemsError: If both frames are equinox-based
            but realized by different IERS conventions.
    """
    _check_route(origin, target)
    leaves = tuple(f for f in (origin, target) if f.kind is FrameKind.IAU)
    previous: dict[Frame, Frame | None] = {origin: None}
    queue = deque([origin])
    while queue:
        frame = queue.popleft()
        if frame == target:
            break
        neighbours = _neighbours(frame)
        if frame.kind is FrameKind.ICRF:
            neighbours = (*neighbours, *leaves)
        for neighbour in neighbours:
            if neighbour not in previous:
                previous[neighbour] = frame
                queue.append(neighbour)
    else:
        raise UnknownFrameError(f"no rotation from {origin} to {target}")

    path = [target]
    while previous[path[-1]] is not None:
        path.append(previous[path[-1]])
    return tuple(reversed(path))


# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------

_Edge = Callable[[Frame, Frame, Time, RotationProvider], Rotation]


def _iau_edge(origin: Frame, target: Frame, time: Time, provider: RotationProvider) -> Rotation:
    tdb = _to_scale(time, TimeScale.TDB, provider)
    return icrf_to_iau(target.body, tdb.seconds_since_j2000())


_EDGES: dict[tuple[FrameKind, FrameKind], _Edge] = {
    (FrameKind.ICRF, FrameKind.MOD): lambda a, b, t, p: icrf_to_mod(t, b.system, p),
    (FrameKind.MOD, FrameKind.TOD): lambda a, b, t, p: mod_to_tod(t, a.system, p),
    (FrameKind.TOD, FrameKind.PEF): lambda a, b, t, p: tod_to_pef(t, a.system, p),
    (FrameKind.PEF, FrameKind.ITRF): lambda a, b, t, p: pef_to_itrf(t, a.system, p),
    (FrameKind.TOD, FrameKind.TEME): lambda a, b, t, p: tod_to_teme(t, p),
    (FrameKind.ICRF, FrameKind.CIRF): lambda a, b, t, p: icrf_to_cirf(t, p),
    (FrameKind.CIRF, FrameKind.TIRF): lambda a, b, t, p: cirf_to_tirf(t, p),
    (FrameKind.TIRF, FrameKind.ITRF): lambda a, b, t, p: tirf_to_itrf(t, p),
    (FrameKind.ICRF, FrameKind.IAU): _iau_edge,
}


def _edge(origin: Frame, target: Frame, time: Time, provider: RotationProvider) -> Rotation:
    forward = _EDGES.get((origin.kind, target.kind))
    if forward is not None:
        return forward(origin, target, time, provider)
    return _EDGES[(target.kind, origin.kind)](target, origin, time, provider).transpose()


def rotation(
    origin: Frame,
    target: Frame,
    time: Time,
    provider: RotationProvider | None = None,
) -> Rotation:
    """Rotation from *origin* to *target* at *time*.

    Args:
        origin: Frame the state is expressed in.
        target: Frame to rotate into.
        time: Epoch, in any time scale.
        provider: Earth orientation data.  Required for any leg that needs
            UT1 (TOD to PEF, CIRF to TIRF).

    Returns:
        The rotation matrix and its time derivative.

    Raises:
        RotationError: If a time conversion or an EOP query fails.  The
            underlying error is attached as ``__cause__``.
        UndefinedOriginPropertyError: If an IAU frame's body has no
            rotational elements.
        IncompatibleReferenceSystemsError: If both frames are equinox-based
            but realized by different IERS conventions.
    """
    provider = _provider(provider)
    result = Rotation.identity()
    for a, b in pairwise(route(origin, target)):
        result = result.compose(_edge(a, b, time, provider))
    return result
