"""Papa header structures"""
import struct
from typing import List

from .enums import PAPA_FORMAT
from .errors import InvalidMagicError, NoTexturesError, TruncatedReadError

PAPA_MAGIC = b'apaP'  # "Papa" stored as a little-endian FourCC
PAPA_HEADER_SIZE = 0x68
PAPA_TEXTURE_SIZE = 24

# Count and offset tables share the same ordering
TABLE_NAMES = (
    'strings', 'textures', 'vbuffers', 'ibuffers', 'materials',
    'meshes', 'skeletons', 'models', 'animations',
)


class PAPA_HEADER:
    """Papa file header (104 bytes)"""
    _STRUCT = struct.Struct('<4sHH9h6x9Q')

    def __init__(self) -> None:
        self.magic: bytes = PAPA_MAGIC
        self.versionMinor: int = 0
        self.versionMajor: int = 0
        self.counts: List[int] = [0] * 9  # Number of records per table
        self.offsets: List[int] = [0] * 9  # Absolute offset of each table

    @property
    def numTextures(self) -> int:
        return self.counts[1]

    @property
    def offsetTextureTable(self) -> int:
        return self.offsets[1]

    @classmethod
    def from_bytes(cls, data: bytes) -> 'PAPA_HEADER':
        """Read PAPA_HEADER from 104 bytes of data"""
        if len(data) < PAPA_HEADER_SIZE:
            raise TruncatedReadError(
                f"Expected {PAPA_HEADER_SIZE} bytes for PAPA_HEADER, got {len(data)}"
            )

        values = cls._STRUCT.unpack_from(data, 0)
        if values[0] != PAPA_MAGIC:
            raise InvalidMagicError(f"Invalid papa magic number: {values[0]!r}")

        header = cls()
        header.magic = values[0]
        header.versionMinor = values[1]
        header.versionMajor = values[2]
        header.counts = list(values[3:12])
        header.offsets = list(values[12:21])

        if header.numTextures <= 0:
            raise NoTexturesError(f"Papa file declares {header.numTextures} texture(s)")

        return header


class PAPA_TEXTURE:
    """Papa texture table entry (24 bytes)"""
    _STRUCT = struct.Struct('<hBBHHQQ')

    def __init__(self) -> None:
        self.nameIndex: int = -1  # Index into the string table, -1 if unnamed
        self.formatTag: int = 0  # Raw format byte, kept for unrecognized formats
        self.mipCount: int = 1
        self.srgb: bool = False
        self.width: int = 0
        self.height: int = 0
        self.dataSize: int = 0
        self.dataOffset: int = 0

    @property
    def format(self) -> PAPA_FORMAT:
        return PAPA_FORMAT.from_tag(self.formatTag)

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> 'PAPA_TEXTURE':
        """Read PAPA_TEXTURE from 24 bytes of data starting at offset"""
        available = len(data) - offset
        if offset < 0 or available < PAPA_TEXTURE_SIZE:
            raise TruncatedReadError(
                f"Expected {PAPA_TEXTURE_SIZE} bytes for PAPA_TEXTURE at offset {offset}, "
                f"got {max(available, 0)}"
            )

        texture = cls()
        values = cls._STRUCT.unpack_from(data, offset)
        texture.nameIndex = values[0]
        texture.formatTag = values[1]
        texture.mipCount = values[2] & 0x0F
        texture.srgb = bool(values[2] & 0x80)
        texture.width = values[3]
        texture.height = values[4]
        texture.dataSize = values[5]
        texture.dataOffset = values[6]

        return texture


def parse_header(data: bytes) -> PAPA_HEADER:
    """Validate and decode the leading header region of a papa file"""
    return PAPA_HEADER.from_bytes(data)


def parse_texture_entry(data: bytes, offset: int = 0) -> PAPA_TEXTURE:
    """Decode the texture table entry found at offset"""
    return PAPA_TEXTURE.from_bytes(data, offset)
