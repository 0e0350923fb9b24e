import hashlib
import logging
import os
from typing import Union

from base58 import b58encode, b58decode

from params.Params import Params
from utils.Errors import (AmountOverflowError, InsufficientDataError,
                          InvalidAssetIDFormatError)

logging.basicConfig(
    level=getattr(logging, os.environ.get('TC_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)



class Utils(object):

    @classmethod
    def copy_from(cls, data: Union[bytes, bytearray], start: int = 0, end: int = None) -> bytes:
        """Copy data[start:end] into a new bytes object, refusing short reads."""
        if end is None:
            end = len(data)
        if start < 0 or end < start or end > len(data):
            logger.debug(f'[utils] cannot copy [{start}:{end}] from {len(data)} bytes')
            raise InsufficientDataError(
                f'need bytes [{start}:{end}] but only {len(data)} available',
                needed=end - start, available=max(len(data) - start, 0))
        return bytes(data[start:end])

    @classmethod
    def int_to_buffer(cls, value: int, width: int = Params.AMOUNT_LENGTH) -> bytes:
        """Big-endian unsigned encoding of value in exactly width bytes."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'expected an int, got {type(value).__name__}')
        if value < 0 or value > 2 ** (8 * width) - 1:
            logger.debug(f'[utils] {value} does not fit in {width} bytes')
            raise AmountOverflowError(
                f'{value} is outside the range of a {width}-byte unsigned integer',
                value=value)
        return value.to_bytes(width, 'big')

    @classmethod
    def buffer_to_int(cls, data: bytes) -> int:
        return int.from_bytes(data, 'big')

    @classmethod
    def buffer_to_b58(cls, data: bytes) -> str:
        """Plain base58, no checksum. Only meant for display."""
        encoded = b58encode(bytes(data))
        return encoded if isinstance(encoded, str) else str(encoded, encoding='utf-8')

    @classmethod
    def b58_to_buffer(cls, text: str) -> bytes:
        return b58decode(text)

    @classmethod
    def sha256(cls, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()

    @classmethod
    def add_checksum(cls, data: bytes) -> bytes:
        return bytes(data) + cls.sha256(data)[-Params.CB58_CHECKSUM_LENGTH:]

    @classmethod
    def validate_checksum(cls, data: bytes) -> bool:
        if len(data) < Params.CB58_CHECKSUM_LENGTH:
            return False
        payload = data[:-Params.CB58_CHECKSUM_LENGTH]
        return cls.sha256(payload)[-Params.CB58_CHECKSUM_LENGTH:] == data[-Params.CB58_CHECKSUM_LENGTH:]

    @classmethod
    def cb58_encode(cls, data: bytes) -> str:
        return cls.buffer_to_b58(cls.add_checksum(data))

    @classmethod
    def cb58_decode(cls, text: str) -> bytes:
        """Decode a cb58 string and strip its verified 4-byte checksum."""
        try:
            raw = cls.b58_to_buffer(text)
        except ValueError as e:
            logger.debug(f'[utils] {text!r} is not base58: {e}')
            raise InvalidAssetIDFormatError(f'{text!r} is not valid base58') from e

        if not cls.validate_checksum(raw):
            logger.debug(f'[utils] bad cb58 checksum for {text!r}')
            raise InvalidAssetIDFormatError(f'invalid cb58 checksum for {text!r}')
        return raw[:-Params.CB58_CHECKSUM_LENGTH]

    @classmethod
    def string_to_assetid(cls, text: str) -> bytes:
        assetid = cls.cb58_decode(text)
        if len(assetid) != Params.ASSETID_LENGTH:
            raise InvalidAssetIDFormatError(
                f'asset id must be {Params.ASSETID_LENGTH} bytes, {text!r} decodes to {len(assetid)}')
        return assetid
