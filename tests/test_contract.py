import pytest

from explorer_api import Contract, ServiceError, ValidationError, VerifySourceCodeRequest

from conftest import API_KEY, USDT, make_response, ok, sent_params

BASE_URL = "https://api.etherscan.io/api"
ENS_REGISTRY = "0xBB9bc244D798123fDe783fCc1C72d3Bb8C189413"


@pytest.fixture
def contract(session):
    return Contract(API_KEY, BASE_URL, session=session)


def verify_request(**overrides):
    fields = dict(
        chain_id="1",
        code_format="solidity-single-file",
        source_code="pragma solidity ^0.8.24; contract Verified {}",
        contract_address=USDT,
        contract_name="contracts/Verified.sol:Verified",
        compiler_version="v0.8.24+commit.e11b9ed9",
    )
    fields.update(overrides)
    return VerifySourceCodeRequest(**fields)


def test_get_contract_abi_returns_raw_json_string(contract, session):
    abi = '[{"constant":true,"inputs":[],"name":"name","outputs":[{"name":"","type":"string"}]}]'
    session.get.return_value = ok(abi)

    assert contract.get_contract_abi(ENS_REGISTRY) == abi
    assert sent_params(session) == {
        "apikey": API_KEY,
        "module": "contract",
        "action": "getabi",
        "address": ENS_REGISTRY,
    }


def test_get_contract_source_code(contract, session):
    source = {
        "SourceCode": "contract A {}",
        "ABI": "[]",
        "EVMVersion": "Default",
        "LicenseType": "MIT",
        "Proxy": "0",
        "Implementation": "",
        "SwarmSource": "",
    }
    session.get.return_value = ok([source])

    result = contract.get_contract_source_code(ENS_REGISTRY)

    assert result == [source]
    assert sent_params(session)["action"] == "getsourcecode"


def test_get_contract_creation_joins_addresses(contract, session):
    addresses = [
        "0xB83c27805aAcA5C7082eB45C868d955Cf04C337F",
        "0x68b3465833fb72A70ecDF485E0e4C7bD8665Fc45",
    ]
    info = [
        {"contractAddress": addresses[0], "contractCreator": "0x1", "txHash": "0xa"},
        {"contractAddress": addresses[1], "contractCreator": "0x2", "txHash": "0xb"},
    ]
    session.get.return_value = ok(info)

    assert contract.get_contract_creator_and_creation_tx_hash(addresses) == info
    params = sent_params(session)
    assert params["action"] == "getcontractcreation"
    assert params["contractaddresses"] == ",".join(addresses)


def test_get_contract_creation_rejects_more_than_five(contract, session):
    with pytest.raises(ValidationError):
        contract.get_contract_creator_and_creation_tx_hash([f"0x{i:040x}" for i in range(6)])
    session.get.assert_not_called()


def test_get_contract_creation_rejects_a_bare_string(contract, session):
    with pytest.raises(ValidationError, match="not a single string"):
        contract.get_contract_creator_and_creation_tx_hash(USDT)
    session.get.assert_not_called()


def test_verify_source_code_posts_form(contract, session):
    session.post.return_value = ok("ezq878u486pzijkvvmerl6a9mzwhv6sefgvqi5tkwceejc7tvn")

    guid = contract.verify_source_code(verify_request())

    assert guid == "ezq878u486pzijkvvmerl6a9mzwhv6sefgvqi5tkwceejc7tvn"
    kwargs = session.post.call_args.kwargs
    assert kwargs["params"]["module"] == "contract"
    assert kwargs["params"]["action"] == "verifysourcecode"
    assert kwargs["data"] == {
        "chainId": "1",
        "codeformat": "solidity-single-file",
        "sourceCode": "pragma solidity ^0.8.24; contract Verified {}",
        "contractaddress": USDT,
        "contractname": "contracts/Verified.sol:Verified",
        "compilerversion": "v0.8.24+commit.e11b9ed9",
    }
    session.get.assert_not_called()


def test_verify_source_code_includes_constructor_arguments(contract, session):
    contract.verify_source_code(verify_request(constructor_arguments="0000000000000000000000000000000000000001"))

    data = session.post.call_args.kwargs["data"]
    assert data["constructorArguments"] == "0000000000000000000000000000000000000001"


def test_verify_source_code_rejects_unknown_format(contract, session):
    with pytest.raises(ValidationError):
        contract.verify_source_code(verify_request(code_format="vyper"))
    session.post.assert_not_called()


def test_verify_resubmission_surfaces_service_error(contract, session):
    session.post.return_value = make_response(
        {"status": "0", "message": "NOTOK", "result": "Contract source code already verified"}
    )

    with pytest.raises(ServiceError) as excinfo:
        contract.verify_source_code(verify_request())

    assert "already verified" in str(excinfo.value)


def test_check_verify_status(contract, session):
    session.get.return_value = ok("Pass - Verified")

    assert contract.check_verify_status("guid-1") == "Pass - Verified"
    params = sent_params(session)
    assert params["action"] == "checkverifystatus"
    assert params["guid"] == "guid-1"
