"""Shader-visible descriptor heap bookkeeping for shader resource views."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

MAX_SRV_COUNT = 512
DEFAULT_DESCRIPTOR_SIZE = 32
FIRST_INDEX = 1
ALL_MIPS = 0xFFFFFFFF
FORMAT_UNKNOWN = "UNKNOWN"


class ViewType(enum.Enum):
    """Whether a descriptor is read-only or read-write."""

    SHADER_RESOURCE = "srv"
    UNORDERED_ACCESS = "uav"


class ViewDimension(enum.Enum):
    """What kind of resource a view looks at."""

    TEXTURE_2D = "texture2d"
    TEXTURE_CUBE = "texturecube"
    BUFFER = "buffer"


@dataclass(frozen=True)
class ViewDescription:
    """A view written into one slot of the heap."""

    view_type: ViewType
    resource: Any
    format: Any
    dimension: ViewDimension
    mip_levels: int = 0
    most_detailed_mip: int = 0
    min_lod_clamp: float = 0.0
    first_element: int = 0
    num_elements: int = 0
    stride: int = 0


class DescriptorHeap:
    """Fixed-size heap that hands out slots and records the views in them.

    Slot 0 is reserved, so allocation starts at index 1.
    """

    def __init__(
        self,
        max_count: int = MAX_SRV_COUNT,
        descriptor_size: int = DEFAULT_DESCRIPTOR_SIZE,
        cpu_start: int = 0,
        gpu_start: int = 0,
    ) -> None:
        if max_count <= 0:
            raise ValueError("a descriptor heap needs at least one slot")
        if descriptor_size <= 0:
            raise ValueError("descriptor size must be positive")
        self.max_count = max_count
        self.descriptor_size = descriptor_size
        self.cpu_start = cpu_start
        self.gpu_start = gpu_start
        self.next_index = FIRST_INDEX
        self._views: dict[int, ViewDescription] = {}

    def allocate(self) -> int:
        """Return the next free slot index and advance past it."""
        index = self.next_index
        self.next_index += 1
        return index

    def has_capacity(self) -> bool:
        """False once more slots have been handed out than the heap holds."""
        return self.next_index <= self.max_count

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.max_count:
            raise IndexError(
                f"descriptor index {index} is outside the heap of {self.max_count}"
            )

    def cpu_handle(self, index: int) -> int:
        """CPU address of slot ``index``."""
        self._check_index(index)
        return self.cpu_start + self.descriptor_size * index

    def gpu_handle(self, index: int) -> int:
        """GPU address of slot ``index``."""
        self._check_index(index)
        return self.gpu_start + self.descriptor_size * index

    def _store(self, index: int, view: ViewDescription) -> ViewDescription:
        self._check_index(index)
        self._views[index] = view
        return view

    def create_texture_srv(
        self,
        index: int,
        resource: Any,
        format: Any,
        mip_levels: int,
        is_cubemap: bool = False,
    ) -> ViewDescription:
        """Write a 2D texture or cube-map view into slot ``index``."""
        if is_cubemap:
            view = ViewDescription(
                view_type=ViewType.SHADER_RESOURCE,
                resource=resource,
                format=format,
                dimension=ViewDimension.TEXTURE_CUBE,
                mip_levels=ALL_MIPS,
                most_detailed_mip=0,
                min_lod_clamp=0.0,
            )
        else:
            view = ViewDescription(
                view_type=ViewType.SHADER_RESOURCE,
                resource=resource,
                format=format,
                dimension=ViewDimension.TEXTURE_2D,
                mip_levels=int(mip_levels),
            )
        return self._store(index, view)

    def _buffer_view(
        self, view_type: ViewType, resource: Any, num_elements: int, stride: int
    ) -> ViewDescription:
        return ViewDescription(
            view_type=view_type,
            resource=resource,
            format=FORMAT_UNKNOWN,
            dimension=ViewDimension.BUFFER,
            first_element=0,
            num_elements=num_elements,
            stride=stride,
        )

    def create_structured_buffer_srv(
        self, index: int, resource: Any, num_elements: int, stride: int
    ) -> ViewDescription:
        """Write a read-only structured-buffer view into slot ``index``."""
        view = self._buffer_view(
            ViewType.SHADER_RESOURCE, resource, num_elements, stride
        )
        return self._store(index, view)

    def create_structured_buffer_uav(
        self, index: int, resource: Any, num_elements: int, stride: int
    ) -> ViewDescription:
        """Write a read-write structured-buffer view into slot ``index``."""
        view = self._buffer_view(
            ViewType.UNORDERED_ACCESS, resource, num_elements, stride
        )
        return self._store(index, view)

    def view(self, index: int) -> ViewDescription:
        """The view stored in slot ``index``; KeyError if the slot is empty."""
        self._check_index(index)
        try:
            return self._views[index]
        except KeyError:
            raise KeyError(f"no view at descriptor index {index}") from None

    def __len__(self) -> int:
        return len(self._views)