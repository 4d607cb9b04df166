"""Texture loading and shader-resource-view bookkeeping."""

from __future__ import annotations

import enum
import os
import struct
from dataclasses import dataclass, replace
from typing import Callable

from renderkit.descriptors import DescriptorHeap, ViewDescription

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
DDS_MAGIC = b"DDS "
SRGB_FORMAT = "R8G8B8A8_UNORM_SRGB"
RGBA_FORMAT = "R8G8B8A8_UNORM"

_DDSD_DEPTH = 0x800000
_DDPF_FOURCC = 0x4
_DDPF_RGB = 0x40
_DDSCAPS2_CUBEMAP = 0x200
_DX10_MISC_TEXTURECUBE = 0x4
_CUBE_FACES = 6

_LEGACY_FOURCC = {
    b"DXT1": "BC1_UNORM",
    b"DXT2": "BC2_UNORM",
    b"DXT3": "BC2_UNORM",
    b"DXT4": "BC3_UNORM",
    b"DXT5": "BC3_UNORM",
    b"ATI1": "BC4_UNORM",
    b"BC4U": "BC4_UNORM",
    b"ATI2": "BC5_UNORM",
    b"BC5U": "BC5_UNORM",
}

_DXGI_FORMATS = {
    2: "R32G32B32A32_FLOAT",
    10: "R16G16B16A16_FLOAT",
    28: RGBA_FORMAT,
    29: SRGB_FORMAT,
    71: "BC1_UNORM",
    72: "BC1_UNORM_SRGB",
    74: "BC2_UNORM",
    75: "BC2_UNORM_SRGB",
    77: "BC3_UNORM",
    78: "BC3_UNORM_SRGB",
    80: "BC4_UNORM",
    81: "BC4_SNORM",
    83: "BC5_UNORM",
    84: "BC5_SNORM",
    87: "B8G8R8A8_UNORM",
    91: "B8G8R8A8_UNORM_SRGB",
    95: "BC6H_UF16",
    96: "BC6H_SF16",
    98: "BC7_UNORM",
    99: "BC7_UNORM_SRGB",
}


class TextureLoadError(Exception):
    """Raised when a texture file cannot be read or understood."""


class TextureCapacityError(RuntimeError):
    """Raised when the descriptor heap has no room for another texture."""


class TextureDimension(enum.IntEnum):
    """Resource dimension of a texture."""

    TEXTURE1D = 2
    TEXTURE2D = 3
    TEXTURE3D = 4


@dataclass(frozen=True)
class TextureMetadata:
    """Size, layout and pixel format of a texture."""

    width: int
    height: int
    format: str
    depth: int = 1
    array_size: int = 1
    mip_levels: int = 1
    dimension: TextureDimension = TextureDimension.TEXTURE2D
    is_cubemap: bool = False

    @property
    def is_compressed(self) -> bool:
        """True for block-compressed formats."""
        return self.format.startswith("BC")


@dataclass(frozen=True)
class Texture:
    """A loaded texture and the descriptor slot that views it."""

    file_path: str
    metadata: TextureMetadata
    srv_index: int
    cpu_handle: int
    gpu_handle: int
    view: ViewDescription


def is_dds(file_path: str | os.PathLike[str]) -> bool:
    """True when the path names a DDS file by its extension."""
    return os.fspath(file_path).endswith(".dds")


def full_mip_count(width: int, height: int) -> int:
    """Number of levels in a complete mip chain down to 1x1."""
    return max(width, height, 1).bit_length()


def _read(file_path: str) -> bytes:
    try:
        with open(file_path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise TextureLoadError(f"cannot read texture {file_path!r}: {exc}") from exc


def _png_metadata(file_path: str, data: bytes) -> TextureMetadata:
    if len(data) < 24 or data[12:16] != b"IHDR":
        raise TextureLoadError(f"{file_path!r} has no PNG image header")
    width, height = struct.unpack(">II", data[16:24])
    if width == 0 or height == 0:
        raise TextureLoadError(f"{file_path!r} has an empty image")
    return TextureMetadata(width=width, height=height, format=SRGB_FORMAT)


def _dds_metadata(file_path: str, data: bytes) -> TextureMetadata:
    if len(data) < 128 or data[:4] != DDS_MAGIC:
        raise TextureLoadError(f"{file_path!r} is not a DDS file")
    _, flags, height, width, _, depth, mip_count = struct.unpack_from("<7I", data, 4)
    _, pf_flags, fourcc, bit_count = struct.unpack_from("<II4sI", data, 76)
    _, caps2 = struct.unpack_from("<II", data, 108)
    depth = depth if flags & _DDSD_DEPTH and depth > 0 else 1
    mip_levels = mip_count or 1
    array_size = 1
    is_cubemap = False

    if pf_flags & _DDPF_FOURCC and fourcc == b"DX10":
        if len(data) < 148:
            raise TextureLoadError(f"{file_path!r} has a truncated DX10 header")
        dxgi_format, _, misc_flag, dx10_array = struct.unpack_from("<4I", data, 128)
        try:
            pixel_format = _DXGI_FORMATS[dxgi_format]
        except KeyError:
            raise TextureLoadError(
                f"{file_path!r} uses unsupported format {dxgi_format}"
            ) from None
        array_size = dx10_array or 1
        if misc_flag & _DX10_MISC_TEXTURECUBE:
            is_cubemap = True
            array_size *= _CUBE_FACES
    elif pf_flags & _DDPF_FOURCC:
        try:
            pixel_format = _LEGACY_FOURCC[fourcc]
        except KeyError:
            raise TextureLoadError(
                f"{file_path!r} uses unsupported FourCC {fourcc!r}"
            ) from None
    elif pf_flags & _DDPF_RGB and bit_count == 32:
        pixel_format = RGBA_FORMAT
    else:
        raise TextureLoadError(f"{file_path!r} uses an unsupported pixel format")

    if not is_cubemap and caps2 & _DDSCAPS2_CUBEMAP:
        is_cubemap = True
        array_size = _CUBE_FACES

    return TextureMetadata(
        width=width,
        height=height,
        format=pixel_format,
        depth=depth,
        array_size=array_size,
        mip_levels=mip_levels,
        dimension=TextureDimension.TEXTURE3D if depth > 1 else TextureDimension.TEXTURE2D,
        is_cubemap=is_cubemap,
    )


def read_metadata(file_path: str) -> TextureMetadata:
    """Read the metadata of a DDS or PNG file from its header."""
    data = _read(file_path)
    if is_dds(file_path):
        return _dds_metadata(file_path, data)
    if data.startswith(PNG_SIGNATURE):
        return _png_metadata(file_path, data)
    raise TextureLoadError(f"{file_path!r} is not a supported image file")


MetadataLoader = Callable[[str], TextureMetadata]


class TextureManager:
    """Loads textures once each and gives every one a shader-resource slot."""

    def __init__(
        self, heap: DescriptorHeap, loader: MetadataLoader = read_metadata
    ) -> None:
        self.heap = heap
        self._loader = loader
        self._textures: dict[str, Texture] = {}

    def load(self, file_path: str | os.PathLike[str]) -> str:
        """Load a texture and return the path used as its handle.

        A path that is already loaded is returned without loading again.
        """
        path = os.fspath(file_path)
        if path in self._textures:
            return path
        metadata = self._loader(path)
        if not metadata.is_compressed:
            metadata = replace(
                metadata, mip_levels=full_mip_count(metadata.width, metadata.height)
            )
        srv_index = self.heap.allocate()
        if not self.heap.has_capacity():
            raise TextureCapacityError(
                f"no descriptor slot left for texture {path!r}"
            )
        view = self.heap.create_texture_srv(
            srv_index, path, metadata.format, metadata.mip_levels, metadata.is_cubemap
        )
        self._textures[path] = Texture(
            file_path=path,
            metadata=metadata,
            srv_index=srv_index,
            cpu_handle=self.heap.cpu_handle(srv_index),
            gpu_handle=self.heap.gpu_handle(srv_index),
            view=view,
        )
        return path

    def is_loaded(self, file_path: str | os.PathLike[str]) -> bool:
        """True when the texture has already been loaded."""
        return os.fspath(file_path) in self._textures

    def _texture(self, file_path: str | os.PathLike[str]) -> Texture:
        path = os.fspath(file_path)
        try:
            return self._textures[path]
        except KeyError:
            raise KeyError(f"texture {path!r} is not loaded") from None

    def gpu_handle(self, file_path: str | os.PathLike[str]) -> int:
        """GPU descriptor address of the texture's view."""
        return self._texture(file_path).gpu_handle

    def metadata(self, file_path: str | os.PathLike[str]) -> TextureMetadata:
        """Metadata of the loaded texture."""
        return self._texture(file_path).metadata

    def srv_index(self, file_path: str | os.PathLike[str]) -> int:
        """Descriptor slot of the texture's view."""
        return self._texture(file_path).srv_index

    def __getitem__(self, file_path: str | os.PathLike[str]) -> Texture:
        return self._texture(file_path)

    def __len__(self) -> int:
        return len(self._textures)