from .mask import mask, mask_offset, mask_width
from .bitfield import ldb, dpb, bit_count
from .casting import ub4, ub8, ub16, ub24, ub32, ub48, ub56, ub64, sb8, sb16, sb32, sb64
from .octets import (
    long_to_octets, bytes_to_value,
    sbvec, sbvector, make_sbvector, ubvec, ubvector, make_ubvector,
)
from .hexcodec import octet_hex, to_hex, hex_of_text, from_hex, octets_of_hex, text_of_hex
from .utils import expt, expt2, pphex, format_word, to_signed64, to_unsigned64
from .errors import (
    BitmopError, ContractViolation, OctetOverflowError, HexOverflowError, MalformedHexError,
)

__all__ = [
    'mask', 'mask_offset', 'mask_width',
    'ldb', 'dpb', 'bit_count',
    'ub4', 'ub8', 'ub16', 'ub24', 'ub32', 'ub48', 'ub56', 'ub64',
    'sb8', 'sb16', 'sb32', 'sb64',
    'long_to_octets', 'bytes_to_value',
    'sbvec', 'sbvector', 'make_sbvector', 'ubvec', 'ubvector', 'make_ubvector',
    'octet_hex', 'to_hex', 'hex_of_text', 'from_hex', 'octets_of_hex', 'text_of_hex',
    'expt', 'expt2', 'pphex', 'format_word', 'to_signed64', 'to_unsigned64',
    'BitmopError', 'ContractViolation', 'OctetOverflowError', 'HexOverflowError',
    'MalformedHexError',
]
