"""Lookup of Anchor framework error codes."""

from __future__ import annotations

import re
from enum import IntEnum

_U32_MAX = 0xFFFFFFFF
_HEX = re.compile(r"\+?[0-9a-fA-F]+")
_DEC = re.compile(r"\+?[0-9]+")


class AnchorErrorCode(IntEnum):
    """Error codes raised by the Anchor framework."""

    InstructionMissing = 100
    InstructionFallbackNotFound = 101
    InstructionDidNotDeserialize = 102
    InstructionDidNotSerialize = 103
    IdlInstructionStub = 1000
    IdlInstructionInvalidProgram = 1001
    IdlAccountNotEmpty = 1002
    EventInstructionStub = 1500
    ConstraintMut = 2000
    ConstraintHasOne = 2001
    ConstraintSigner = 2002
    ConstraintRaw = 2003
    ConstraintOwner = 2004
    ConstraintRentExempt = 2005
    ConstraintSeeds = 2006
    ConstraintExecutable = 2007
    ConstraintState = 2008
    ConstraintAssociated = 2009
    ConstraintAssociatedInit = 2010
    ConstraintClose = 2011
    ConstraintAddress = 2012
    ConstraintZero = 2013
    ConstraintTokenMint = 2014
    ConstraintTokenOwner = 2015
    ConstraintMintMintAuthority = 2016
    ConstraintMintFreezeAuthority = 2017
    ConstraintMintDecimals = 2018
    ConstraintSpace = 2019
    ConstraintAccountIsNone = 2020
    ConstraintTokenTokenProgram = 2021
    ConstraintMintTokenProgram = 2022
    ConstraintAssociatedTokenTokenProgram = 2023
    ConstraintMintGroupPointerExtension = 2024
    ConstraintMintGroupPointerExtensionAuthority = 2025
    ConstraintMintGroupPointerExtensionGroupAddress = 2026
    ConstraintMintGroupMemberPointerExtension = 2027
    ConstraintMintGroupMemberPointerExtensionAuthority = 2028
    ConstraintMintGroupMemberPointerExtensionMemberAddress = 2029
    ConstraintMintMetadataPointerExtension = 2030
    ConstraintMintMetadataPointerExtensionAuthority = 2031
    ConstraintMintMetadataPointerExtensionMetadataAddress = 2032
    ConstraintMintCloseAuthorityExtension = 2033
    ConstraintMintCloseAuthorityExtensionAuthority = 2034
    ConstraintMintPermanentDelegateExtension = 2035
    ConstraintMintPermanentDelegateExtensionDelegate = 2036
    ConstraintMintTransferHookExtension = 2037
    ConstraintMintTransferHookExtensionAuthority = 2038
    ConstraintMintTransferHookExtensionProgramId = 2039
    RequireViolated = 2500
    RequireEqViolated = 2501
    RequireKeysEqViolated = 2502
    RequireNeqViolated = 2503
    RequireKeysNeqViolated = 2504
    RequireGtViolated = 2505
    RequireGteViolated = 2506
    AccountDiscriminatorAlreadySet = 3000
    AccountDiscriminatorNotFound = 3001
    AccountDiscriminatorMismatch = 3002
    AccountDidNotDeserialize = 3003
    AccountDidNotSerialize = 3004
    AccountNotEnoughKeys = 3005
    AccountNotMutable = 3006
    AccountOwnedByWrongProgram = 3007
    InvalidProgramId = 3008
    InvalidProgramExecutable = 3009
    AccountNotSigner = 3010
    AccountNotSystemOwned = 3011
    AccountNotInitialized = 3012
    AccountNotProgramData = 3013
    AccountNotAssociatedTokenAccount = 3014
    AccountSysvarMismatch = 3015
    AccountReallocExceedsLimit = 3016
    AccountDuplicateReallocs = 3017
    DeclaredProgramIdMismatch = 4100
    TryingToInitPayerAsProgramAccount = 4101
    InvalidNumericConversion = 4102
    Deprecated = 5000


def parse_error_code(text: str) -> int:
    """Parse an unsigned 32-bit error code, in hex when prefixed by 0x."""
    if text.startswith("0x"):
        digits, pattern, base = text[2:], _HEX, 16
        message = "Invalid hexadecimal error code"
    else:
        digits, pattern, base = text, _DEC, 10
        message = "Invalid decimal error code"
    if not pattern.fullmatch(digits):
        raise ValueError(message)
    code = int(digits, base)
    if code > _U32_MAX:
        raise ValueError(message)
    return code


def describe_error(code: int) -> str:
    """Describe an error code, or report it as unknown."""
    try:
        error = AnchorErrorCode(code)
    except ValueError:
        return f"Unknown error code: {code}"
    return f"Anchor ErrorCode:\nError Code: {code}\nError Type: {error.name}"