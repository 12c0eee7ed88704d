"""Records for cryptosystem state and blockchain blocks and wallets."""

from __future__ import annotations

from dataclasses import dataclass, field

KEY_BLOCK_SIZE = 26


@dataclass
class KeyPair:
    private_key: str = ""
    public_key: str = ""


@dataclass
class Playfair:
    """A message, its ciphertext and a 26 by 26 key block (or none yet)."""

    message: str = ""
    key_block: list[list[str]] = field(default_factory=list)
    ciphertext: str = ""

    def __post_init__(self) -> None:
        if self.key_block and (
            len(self.key_block) != KEY_BLOCK_SIZE
            or any(len(row) != KEY_BLOCK_SIZE for row in self.key_block)
        ):
            raise ValueError(f"key_block must be {KEY_BLOCK_SIZE} by {KEY_BLOCK_SIZE}.")


_AES_MATRICES = ("block", "s_box", "inverse_s_box", "key_expansion_block")


@dataclass
class AesState:
    """AES working matrices, all ``rows`` by ``columns``; empty ones are zero-filled."""

    rows: int = 4
    columns: int = 4
    keystream: bytes = b""
    block: list[list[int]] = field(default_factory=list)
    s_box: list[list[int]] = field(default_factory=list)
    inverse_s_box: list[list[int]] = field(default_factory=list)
    key_expansion_block: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.columns < 1:
            raise ValueError("rows and columns must be positive.")
        for name in _AES_MATRICES:
            matrix = getattr(self, name)
            if not matrix:
                setattr(self, name, [[0] * self.columns for _ in range(self.rows)])
            elif len(matrix) != self.rows or any(len(row) != self.columns for row in matrix):
                raise ValueError(f"{name} must be {self.rows} by {self.columns}.")


@dataclass
class RsaKey:
    p: int
    q: int
    d: int = 0
    message: str = ""
    ciphertext: str = ""

    def __post_init__(self) -> None:
        if self.p < 2 or self.q < 2:
            raise ValueError("p and q must be at least 2.")

    def phi(self) -> int:
        """Euler's totient of p * q for primes p and q."""
        return (self.p - 1) * (self.q - 1)


@dataclass
class Block:
    ciphertext: str = ""
    public_key: str = ""
    private_key: str = ""
    hash: str = ""
    block_id: str = ""
    block_name: str = ""


@dataclass
class Wallet:
    holder_name: str = ""
    wallet_key: int = 0
    wallet_address: int = 0
    public_key: str = ""
    private_key: str = ""
    hash: str = ""

    def __post_init__(self) -> None:
        if self.wallet_key < 0 or self.wallet_address < 0:
            raise ValueError("wallet_key and wallet_address must not be negative.")