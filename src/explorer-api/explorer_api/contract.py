from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import requests

from .api_client import ApiClient
from .errors import ValidationError
from .models import ContractCreationInfo, ContractSource

MAX_CREATION_ADDRESSES = 5

CODE_FORMATS = ("solidity-single-file", "solidity-standard-json-input")


@dataclass(frozen=True)
class VerifySourceCodeRequest:
    """
    Form fields for ``verifysourcecode``.

    ``contract_name`` includes the path for standard-json input, e.g.
    ``contracts/Verified.sol:Verified``; ``compiler_version`` looks like
    ``v0.8.24+commit.e11b9ed9``.
    """

    chain_id: str
    code_format: str
    source_code: str
    contract_address: str
    contract_name: str
    compiler_version: str
    constructor_arguments: Optional[str] = None

    def to_form(self) -> Dict[str, str]:
        form = {
            "chainId": str(self.chain_id),
            "codeformat": self.code_format,
            "sourceCode": self.source_code,
            "contractaddress": self.contract_address,
            "contractname": self.contract_name,
            "compilerversion": self.compiler_version,
        }
        if self.constructor_arguments:
            form["constructorArguments"] = self.constructor_arguments
        return form


class Contract:
    """Endpoints of the ``contract`` module."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.client = ApiClient(api_key, base_url, "contract", session=session, timeout=timeout)

    def get_contract_abi(self, address: str) -> str:
        """Return the ABI of a verified contract as the raw JSON string."""
        params = self.client.params("getabi", address=address)
        return self.client.get(params)

    def get_contract_source_code(self, address: str) -> List[ContractSource]:
        params = self.client.params("getsourcecode", address=address)
        return self.client.get(params)

    def get_contract_creator_and_creation_tx_hash(
        self, contract_addresses: Sequence[str]
    ) -> List[ContractCreationInfo]:
        if isinstance(contract_addresses, str):
            raise ValidationError("contract_addresses must be a list of addresses, not a single string.")
        if len(contract_addresses) > MAX_CREATION_ADDRESSES:
            raise ValidationError(
                f"Maximum of {MAX_CREATION_ADDRESSES} contract addresses allowed, "
                f"got {len(contract_addresses)}."
            )
        params = self.client.params(
            "getcontractcreation",
            contractaddresses=",".join(contract_addresses),
        )
        return self.client.get(params)

    def verify_source_code(self, request: VerifySourceCodeRequest) -> str:
        """
        Submit source code for verification and return the receipt GUID.

        The submission is not idempotent: sending it twice may be rejected as
        already verified or queued a second time. Poll the outcome with
        :meth:`check_verify_status`.
        """
        if request.code_format not in CODE_FORMATS:
            raise ValidationError(
                f"Unsupported code format '{request.code_format}'. Expected one of: "
                + ", ".join(CODE_FORMATS)
                + "."
            )
        params = self.client.params("verifysourcecode")
        return self.client.post(params, request.to_form())

    def check_verify_status(self, guid: str) -> str:
        params = self.client.params("checkverifystatus", guid=guid)
        return self.client.get(params)
