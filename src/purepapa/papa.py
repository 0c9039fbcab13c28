"""Main papa file handler"""
import io
import logging
from typing import BinaryIO, Union

from .decompressors import MarkerDecompressor, get_decompressor
from .enums import PAPA_FORMAT, ImageOrigin
from .errors import (
    InvalidTextureError,
    ResourceLimitError,
    StreamError,
    TruncatedReadError,
)
from .headers import PAPA_HEADER, PAPA_HEADER_SIZE, PAPA_TEXTURE, PAPA_TEXTURE_SIZE, TABLE_NAMES
from .image import CanonicalImage

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAYLOAD_BYTES = 256 * 1024 * 1024
DEFAULT_MAX_TEXTURE_PIXELS = 8192 * 8192


def _stream_length(stream: BinaryIO) -> int:
    try:
        length = stream.seek(0, io.SEEK_END)
        stream.seek(0)
    except OSError as exc:
        raise StreamError(f"Failed to seek papa stream: {exc}") from exc
    return length


def _read_at(stream: BinaryIO, offset: int, size: int, what: str) -> bytes:
    """Read exactly size bytes at offset, or fail with TruncatedReadError"""
    try:
        stream.seek(offset)
        chunk = stream.read(size)
    except OSError as exc:
        raise StreamError(f"Failed to read {what} at offset {offset}: {exc}") from exc
    if chunk is None or len(chunk) < size:
        got = 0 if chunk is None else len(chunk)
        raise TruncatedReadError(f"Expected {size} bytes for {what} at offset {offset}, got {got}")
    return chunk


def decode_texture(payload: bytes, width: int, height: int,
                   papa_format: Union[PAPA_FORMAT, int]) -> CanonicalImage:
    """
    Decode a texture payload into a bottom-first canonical image

    Unrecognized formats never fail; they produce a solid marker image of
    the requested size so the caller always has something to show.

    Args:
        payload: Texture data (level 0 first)
        width: Texture width in pixels
        height: Texture height in pixels
        papa_format: PAPA_FORMAT or the raw format tag

    Returns:
        CanonicalImage in RGBA channel order with origin BOTTOM_FIRST
    """
    fmt = PAPA_FORMAT.from_tag(int(papa_format))
    decompressor = get_decompressor(fmt)
    if isinstance(decompressor, MarkerDecompressor):
        logger.warning("Unsupported texture format %d, using marker image", int(papa_format))
    pixels = decompressor.decompress(payload, width, height)
    return CanonicalImage(pixels, ImageOrigin.BOTTOM_FIRST)


class PAPA:
    """Papa container, reduced to its header and first texture"""
    def __init__(self) -> None:
        self.header: PAPA_HEADER = PAPA_HEADER()
        self.texture: PAPA_TEXTURE = PAPA_TEXTURE()
        self.data: bytes = b''  # Payload of the first texture, all mips included

    def __str__(self) -> str:
        """Return debug string representation of papa file"""
        lines = ["Papa File Information:"]
        lines.append(f"  Magic: {self.header.magic}")
        lines.append(f"  Version: {self.header.versionMajor}.{self.header.versionMinor}")
        for name, count, offset in zip(TABLE_NAMES, self.header.counts, self.header.offsets):
            if count:
                lines.append(f"  {name.capitalize()}: {count} (table at 0x{offset:X})")

        texture = self.texture
        fmt = texture.format
        fmt_str = fmt.name if fmt != PAPA_FORMAT.UNKNOWN else f"Unknown ({texture.formatTag})"
        lines.append("  First Texture:")
        lines.append(f"    Format: {fmt_str}{' (sRGB)' if texture.srgb else ''}")
        lines.append(f"    Dimensions: {texture.width}x{texture.height}")
        lines.append(f"    Mipmap Levels: {texture.mipCount}")
        lines.append(f"    Data Size: {texture.dataSize} bytes at 0x{texture.dataOffset:X}")

        return "\n".join(lines)

    @classmethod
    def from_bytes(cls, data: bytes, max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES,
                   max_texture_pixels: int = DEFAULT_MAX_TEXTURE_PIXELS) -> 'PAPA':
        """Read papa from bytes"""
        return cls.from_stream(io.BytesIO(data), max_payload_bytes, max_texture_pixels)

    @classmethod
    def from_stream(cls, stream: BinaryIO, max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES,
                    max_texture_pixels: int = DEFAULT_MAX_TEXTURE_PIXELS) -> 'PAPA':
        """
        Read the header, first texture entry and its payload from a seekable stream

        Every size field is checked against the stream length and the given
        limits before the payload is read.

        Raises:
            FormatError: Bad magic, no textures, short structures or an
                inconsistent texture entry
            ResourceLimitError: Payload or texture larger than allowed
            StreamError: The stream failed to seek or read
        """
        papa = cls()
        length = _stream_length(stream)

        header_bytes = _read_at(stream, 0, PAPA_HEADER_SIZE, "PAPA_HEADER")
        papa.header = PAPA_HEADER.from_bytes(header_bytes)
        logger.debug("Papa header: %d texture(s), table at 0x%X",
                     papa.header.numTextures, papa.header.offsetTextureTable)

        table_offset = papa.header.offsetTextureTable
        entry_bytes = _read_at(stream, table_offset, PAPA_TEXTURE_SIZE, "PAPA_TEXTURE")
        papa.texture = PAPA_TEXTURE.from_bytes(entry_bytes)
        logger.debug("First texture: format %d, %dx%d, %d bytes at 0x%X",
                     papa.texture.formatTag, papa.texture.width, papa.texture.height,
                     papa.texture.dataSize, papa.texture.dataOffset)

        papa._validate_texture(length, max_payload_bytes, max_texture_pixels)

        papa.data = _read_at(stream, papa.texture.dataOffset, papa.texture.dataSize, "texture data")
        return papa

    def _validate_texture(self, stream_length: int, max_payload_bytes: int, max_texture_pixels: int) -> None:
        """Reject entries whose sizes cannot be trusted, before allocating anything"""
        texture = self.texture
        if texture.width == 0 or texture.height == 0:
            raise InvalidTextureError(f"Invalid texture dimensions {texture.width}x{texture.height}")

        if texture.width * texture.height > max_texture_pixels:
            raise ResourceLimitError(
                f"Texture {texture.width}x{texture.height} exceeds the limit of {max_texture_pixels} pixels"
            )
        if texture.dataSize > max_payload_bytes:
            raise ResourceLimitError(
                f"Texture data size {texture.dataSize} exceeds the limit of {max_payload_bytes} bytes"
            )
        if texture.dataOffset + texture.dataSize > stream_length:
            raise ResourceLimitError(
                f"Texture data ({texture.dataSize} bytes at offset {texture.dataOffset}) "
                f"extends past the end of the stream ({stream_length} bytes)"
            )

        decompressor = get_decompressor(texture.format)
        required = decompressor.required_size(texture.width, texture.height)
        if texture.dataSize < required:
            raise InvalidTextureError(
                f"Texture data size {texture.dataSize} is too small for {texture.format.name} "
                f"{texture.width}x{texture.height} (expected at least {required})"
            )
        block_size = getattr(decompressor, 'BLOCK_SIZE', None)
        if block_size and texture.dataSize % block_size:
            raise InvalidTextureError(
                f"Texture data size {texture.dataSize} is not a multiple of the "
                f"{block_size} byte {texture.format.name} block"
            )

    def get_width(self) -> int:
        return self.texture.width

    def get_height(self) -> int:
        return self.texture.height

    def get_format(self) -> PAPA_FORMAT:
        return self.texture.format

    def to_image(self) -> CanonicalImage:
        """
        Decode the first texture's top mip level

        Returns:
            CanonicalImage (RGBA, bottom row first)
        """
        return decode_texture(self.data, self.texture.width, self.texture.height, self.texture.formatTag)
