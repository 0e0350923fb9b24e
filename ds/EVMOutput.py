import binascii
import logging
import os
from typing import Union, Tuple

from utils.Errors import (InvalidAddressFormatError, InvalidAssetIDFormatError,
                          InsufficientDataError)
from utils.Utils import Utils
from params.Params import Params
from wallet.Wallet import Wallet


logging.basicConfig(
    level=getattr(logging, os.environ.get('TC_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def select_output_class(*args, **kwargs) -> 'EVMOutput':
    """Return the output instance matching the given arguments."""
    return EVMOutput(*args, **kwargs)


class EVMOutput(object):
    """One transfer output: recipient address, amount and asset id.

    Encoded as a fixed 60-byte slice
        address (20) || amount (8, big-endian) || assetid (32)
    with no framing, so it can only be read at a known offset inside a
    larger buffer.
    """

    def __init__(self, address: Union[bytes, str] = None, amount: int = None,
                 assetid: Union[bytes, str] = None):
        given = [arg is not None for arg in (address, amount, assetid)]
        if any(given) and not all(given):
            raise TypeError('address, amount and assetid must be given together or not at all')

        if not any(given):
            self.__address = bytes(Params.ADDRESS_LENGTH)
            self.__amount = bytes(Params.AMOUNT_LENGTH)
            self.__amount_value = 0
            self.__assetid = bytes(Params.ASSETID_LENGTH)
            return

        # the byte form of the amount is always derived from the value
        self.__address = self._to_address(address)
        self.__amount = Utils.int_to_buffer(amount, Params.AMOUNT_LENGTH)
        self.__amount_value = amount
        self.__assetid = self._to_assetid(assetid)

    address = property(lambda s: s.__address)
    amount = property(lambda s: s.__amount_value)
    assetid = property(lambda s: s.__assetid)

    def get_address(self) -> bytes:
        return self.__address

    def get_amount(self) -> int:
        return int(self.__amount_value)

    def get_assetid(self) -> bytes:
        return self.__assetid

    @staticmethod
    def _to_address(address) -> bytes:
        if isinstance(address, str):
            return Wallet.address_to_bytes(address)
        if not isinstance(address, (bytes, bytearray)):
            raise TypeError(f'address must be bytes or str, got {type(address).__name__}')
        if len(address) != Params.ADDRESS_LENGTH:
            raise InvalidAddressFormatError(
                f'address must be {Params.ADDRESS_LENGTH} bytes, got {len(address)}')
        return bytes(address)

    @staticmethod
    def _to_assetid(assetid) -> bytes:
        if isinstance(assetid, str):
            return Utils.string_to_assetid(assetid)
        if not isinstance(assetid, (bytes, bytearray)):
            raise TypeError(f'assetid must be bytes or str, got {type(assetid).__name__}')
        if len(assetid) != Params.ASSETID_LENGTH:
            raise InvalidAssetIDFormatError(
                f'assetid must be {Params.ASSETID_LENGTH} bytes, got {len(assetid)}')
        return bytes(assetid)

    @staticmethod
    def size() -> int:
        return Params.OUTPUT_LENGTH

    def to_buffer(self) -> bytes:
        return self.__address + self.__amount + self.__assetid

    def from_buffer(self, data: bytes, offset: int = 0) -> int:
        """Read one output from data at offset and return the offset after it.

        Nothing is assigned unless all 60 bytes are available.
        """
        end = offset + Params.OUTPUT_LENGTH
        if offset < 0 or end > len(data):
            logger.debug(f'[output] {len(data)} bytes is too short for an output at offset {offset}')
            raise InsufficientDataError(
                f'an output needs {Params.OUTPUT_LENGTH} bytes at offset {offset}, '
                f'only {max(len(data) - offset, 0)} available',
                needed=Params.OUTPUT_LENGTH, available=max(len(data) - offset, 0))

        address = Utils.copy_from(data, offset, offset + Params.ADDRESS_LENGTH)
        offset += Params.ADDRESS_LENGTH
        amount = Utils.copy_from(data, offset, offset + Params.AMOUNT_LENGTH)
        offset += Params.AMOUNT_LENGTH
        assetid = Utils.copy_from(data, offset, offset + Params.ASSETID_LENGTH)
        offset += Params.ASSETID_LENGTH

        self.__address = address
        self.__amount = amount
        self.__amount_value = Utils.buffer_to_int(amount)
        self.__assetid = assetid
        return offset

    @classmethod
    def parse(cls, data: bytes, offset: int = 0) -> Tuple['EVMOutput', int]:
        output = cls()
        offset = output.from_buffer(data, offset)
        return output, offset

    def to_string(self) -> str:
        return Utils.buffer_to_b58(self.to_buffer())

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return (f'EVMOutput(address={binascii.hexlify(self.__address).decode()}, '
                f'amount={self.__amount_value}, '
                f'assetid={binascii.hexlify(self.__assetid).decode()})')

    def __eq__(self, other):
        if not isinstance(other, EVMOutput):
            return NotImplemented
        return self.to_buffer() == other.to_buffer()

    # from_buffer decodes in place, so records are not hashable
    __hash__ = None
