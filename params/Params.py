from typing import Iterable


class Params:
    # Widths of the fields of an EVM output, in wire order.
    ADDRESS_LENGTH = int(20)
    AMOUNT_LENGTH = int(8)
    ASSETID_LENGTH = int(32)

    # address || amount || assetid, no prefix and no checksum
    OUTPUT_LENGTH = ADDRESS_LENGTH + AMOUNT_LENGTH + ASSETID_LENGTH

    # The largest amount an 8-byte unsigned field can carry.
    MAX_AMOUNT = int(2 ** (8 * AMOUNT_LENGTH) - 1)

    # Version bytes prepended to a hash160 before base58check encoding.
    # 0x00 for P2PKH and 0x05 for P2SH
    ADDRESS_VERSION_P2PKH = b'\x00'
    ADDRESS_VERSION_P2SH = b'\x05'
    ADDRESS_VERSIONS: Iterable[bytes] = (ADDRESS_VERSION_P2PKH, ADDRESS_VERSION_P2SH)

    # EVM style addresses: '0x' followed by 40 hex digits
    EVM_ADDRESS_PREFIX = '0x'

    # cb58 appends the last 4 bytes of sha256(payload)
    CB58_CHECKSUM_LENGTH = int(4)
