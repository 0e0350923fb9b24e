import binascii
import hashlib
import logging
import os
from base58 import b58encode_check, b58decode_check

from params.Params import Params
from utils.Errors import InvalidAddressFormatError

logging.basicConfig(
    level=getattr(logging, os.environ.get('TC_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


class Wallet(object):

    @classmethod
    def hash_pubkey(cls, data: bytes) -> bytes:
        sha = hashlib.sha256(data).digest()
        try:
            ripe = hashlib.new('ripemd160', sha)
        except ValueError as e:
            raise RuntimeError('missing ripemd160 hash algorithm') from e
        return ripe.digest()

    @classmethod
    def bytes_to_address(cls, identity: bytes, version: bytes = Params.ADDRESS_VERSION_P2PKH) -> str:
        if len(identity) != Params.ADDRESS_LENGTH:
            raise InvalidAddressFormatError(
                f'address must be {Params.ADDRESS_LENGTH} bytes, got {len(identity)}')
        address = b58encode_check(version + bytes(identity))
        address = address if isinstance(address, str) else str(address, encoding="utf-8")
        return address

    @classmethod
    def pubkey_to_address(cls, pubkey: bytes) -> str:
        return cls.bytes_to_address(cls.hash_pubkey(pubkey))

    @classmethod
    def address_to_bytes(cls, address: str) -> bytes:
        """Decode a human readable address into its 20-byte identity.

        Two forms are understood: base58check with a P2PKH or P2SH version
        byte, and the 0x-prefixed hex form used by EVM chains.
        """
        if not isinstance(address, str):
            raise InvalidAddressFormatError(f'address must be a string, got {type(address).__name__}')

        if address[:2].lower() == Params.EVM_ADDRESS_PREFIX:
            digits = address[2:]
            if len(digits) != 2 * Params.ADDRESS_LENGTH:
                logger.debug(f'[wallet] wrong hex address length: {address!r}')
                raise InvalidAddressFormatError(f'{address!r} is not a 20-byte hex address')
            try:
                return binascii.unhexlify(digits)
            except ValueError as e:
                logger.debug(f'[wallet] bad hex in address {address!r}')
                raise InvalidAddressFormatError(f'{address!r} is not a 20-byte hex address') from e

        try:
            payload = b58decode_check(address)
        except ValueError as e:
            logger.debug(f'[wallet] cannot decode address {address!r}: {e}')
            raise InvalidAddressFormatError(f'{address!r} is not a valid base58check address') from e

        version, identity = payload[:1], payload[1:]
        if version not in Params.ADDRESS_VERSIONS or len(identity) != Params.ADDRESS_LENGTH:
            logger.debug(f'[wallet] unexpected address payload for {address!r}')
            raise InvalidAddressFormatError(f'{address!r} does not carry a 20-byte identity')
        return identity

