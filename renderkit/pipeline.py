"""Blend modes and the registry of pipeline states and root signatures."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class BlendMode(enum.IntEnum):
    """How a drawn pixel is combined with what is already there."""

    NONE = 0
    NORMAL = 1
    ADD = 2
    SUBTRACT = 3
    MULTIPLY = 4
    SCREEN = 5


BLEND_MODE_COUNT = len(BlendMode)


class Blend(enum.Enum):
    """Blend factor."""

    ZERO = "zero"
    ONE = "one"
    SRC_COLOR = "src_color"
    SRC_ALPHA = "src_alpha"
    INV_SRC_ALPHA = "inv_src_alpha"
    DEST_COLOR = "dest_color"
    INV_DEST_COLOR = "inv_dest_color"


class BlendOp(enum.Enum):
    """Blend operation."""

    ADD = "add"
    SUBTRACT = "subtract"
    REV_SUBTRACT = "rev_subtract"


class PipelineKind(enum.Enum):
    """The pipelines the renderer builds."""

    OBJECT = "object"
    PARTICLE = "particle"
    GSO = "gso"
    SPRITE = "sprite"
    COPY = "copy"
    DEPTH_FILTER = "depth_filter"
    DISSOLVE = "dissolve"
    RANDOM = "random"
    HSV = "hsv"
    SKINNING = "skinning"
    SKYBOX = "skybox"
    GPU_PARTICLE = "gpu_particle"
    COMPUTE = "compute"
    COMPUTE_PARTICLE = "compute_particle"
    COMPUTE_EMIT = "compute_emit"
    COMPUTE_UPDATE = "compute_update"

    @property
    def is_compute(self) -> bool:
        """Compute pipelines have a single state and no blend mode."""
        return self.value.startswith("compute")


@dataclass(frozen=True)
class BlendDescription:
    """Colour and alpha blend settings of a render target."""

    enabled: bool
    src_blend: Blend = Blend.ONE
    dest_blend: Blend = Blend.ZERO
    blend_op: BlendOp = BlendOp.ADD
    src_blend_alpha: Blend = Blend.ONE
    dest_blend_alpha: Blend = Blend.ZERO
    blend_op_alpha: BlendOp = BlendOp.ADD


_BLENDS = {
    BlendMode.NONE: BlendDescription(enabled=False),
    BlendMode.NORMAL: BlendDescription(
        True, Blend.SRC_ALPHA, Blend.INV_SRC_ALPHA, BlendOp.ADD
    ),
    BlendMode.ADD: BlendDescription(True, Blend.SRC_ALPHA, Blend.ONE, BlendOp.ADD),
    BlendMode.SUBTRACT: BlendDescription(
        True, Blend.SRC_ALPHA, Blend.ONE, BlendOp.REV_SUBTRACT
    ),
    BlendMode.MULTIPLY: BlendDescription(
        True, Blend.ZERO, Blend.SRC_COLOR, BlendOp.ADD
    ),
    BlendMode.SCREEN: BlendDescription(
        True, Blend.INV_DEST_COLOR, Blend.ONE, BlendOp.ADD
    ),
}


def blend_description(mode: BlendMode | int) -> BlendDescription:
    """Blend settings for ``mode``; ValueError for an unknown mode."""
    return _BLENDS[BlendMode(mode)]


class PipelineRegistry:
    """Holds one pipeline state per kind and blend mode, and root signatures."""

    def __init__(self) -> None:
        self._states: dict[tuple[PipelineKind, BlendMode | None], Any] = {}
        self._signatures: dict[PipelineKind, Any] = {}

    @staticmethod
    def _key(
        kind: PipelineKind, mode: BlendMode | int | None
    ) -> tuple[PipelineKind, BlendMode | None]:
        kind = PipelineKind(kind)
        if kind.is_compute:
            if mode is not None:
                raise ValueError(f"{kind.name} pipelines take no blend mode")
            return kind, None
        if mode is None:
            raise ValueError(f"{kind.name} pipelines need a blend mode")
        return kind, BlendMode(mode)

    def register(
        self, kind: PipelineKind, mode: BlendMode | int | None, state: Any
    ) -> None:
        """Store ``state`` for ``kind`` and ``mode``."""
        self._states[self._key(kind, mode)] = state

    def pipeline_state(
        self, kind: PipelineKind, mode: BlendMode | int | None = None
    ) -> Any:
        """The state stored for ``kind`` and ``mode``; KeyError if none."""
        key = self._key(kind, mode)
        try:
            return self._states[key]
        except KeyError:
            raise KeyError(f"no pipeline state for {key[0].name} / {key[1]}") from None

    def set_root_signature(self, kind: PipelineKind, signature: Any) -> None:
        """Store the root signature used by ``kind``."""
        self._signatures[PipelineKind(kind)] = signature

    def root_signature(self, kind: PipelineKind) -> Any:
        """The root signature of ``kind``; KeyError if none."""
        kind = PipelineKind(kind)
        try:
            return self._signatures[kind]
        except KeyError:
            raise KeyError(f"no root signature for {kind.name}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._states