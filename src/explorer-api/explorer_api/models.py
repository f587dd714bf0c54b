"""
Record shapes returned by the explorer endpoints.

Every record is the decoded JSON object exactly as the explorer sent it. Keys
keep their wire spelling and numeric values stay decimal strings, so Wei
amounts above 2**53 survive untouched.
"""

from typing import TypedDict


class AccountBalance(TypedDict, total=False):
    account: str
    balance: str


# "from" is a keyword, hence the functional syntax for the transaction shapes.
Transaction = TypedDict(
    "Transaction",
    {
        "blockNumber": str,
        "timeStamp": str,
        "hash": str,
        "nonce": str,
        "blockHash": str,
        "transactionIndex": str,
        "from": str,
        "to": str,
        "value": str,
        "gas": str,
        "gasPrice": str,
        "isError": str,
        "txreceipt_status": str,
        "input": str,
        "contractAddress": str,
        "cumulativeGasUsed": str,
        "gasUsed": str,
        "confirmations": str,
        "methodId": str,
        "functionName": str,
    },
    total=False,
)

InternalTransaction = TypedDict(
    "InternalTransaction",
    {
        "blockNumber": str,
        "timeStamp": str,
        "hash": str,
        "from": str,
        "to": str,
        "value": str,
        "contractAddress": str,
        "input": str,
        "type": str,
        "gas": str,
        "gasUsed": str,
        "traceId": str,
        "isError": str,
        "errCode": str,
    },
    total=False,
)

_TRANSFER_FIELDS = {
    "blockNumber": str,
    "timeStamp": str,
    "hash": str,
    "nonce": str,
    "blockHash": str,
    "transactionIndex": str,
    "from": str,
    "to": str,
    "contractAddress": str,
    "gas": str,
    "gasPrice": str,
    "gasUsed": str,
    "cumulativeGasUsed": str,
    "input": str,
    "confirmations": str,
}

ERC20TransferEvent = TypedDict(
    "ERC20TransferEvent",
    {
        **_TRANSFER_FIELDS,
        "value": str,
        "tokenName": str,
        "tokenSymbol": str,
        "tokenDecimal": str,
    },
    total=False,
)

ERC721TransferEvent = TypedDict(
    "ERC721TransferEvent",
    {
        **_TRANSFER_FIELDS,
        "tokenID": str,
        "tokenName": str,
        "tokenSymbol": str,
        "tokenDecimal": str,
    },
    total=False,
)

ERC1155TransferEvent = TypedDict(
    "ERC1155TransferEvent",
    {
        **_TRANSFER_FIELDS,
        "tokenID": str,
        "tokenValue": str,
        "tokenName": str,
        "tokenSymbol": str,
    },
    total=False,
)


class MinedBlock(TypedDict, total=False):
    blockNumber: str
    timeStamp: str
    blockReward: str


class BeaconChainWithdrawal(TypedDict, total=False):
    withdrawalIndex: str
    validatorIndex: str
    address: str
    amount: str
    blockNumber: str
    timestamp: str


class ContractCreationInfo(TypedDict, total=False):
    contractAddress: str
    contractCreator: str
    txHash: str


class ContractSource(TypedDict, total=False):
    SourceCode: str
    ABI: str
    ContractName: str
    CompilerVersion: str
    OptimizationUsed: str
    Runs: str
    ConstructorArguments: str
    EVMVersion: str
    Library: str
    LicenseType: str
    Proxy: str
    Implementation: str
    SwarmSource: str
