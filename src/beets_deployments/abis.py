"""Minimal ABIs for the contracts the scripts and tasks talk to.

Only the functions and events actually called are listed. Contracts the task
runner deploys load their full ABI from the task's compiled artifact instead.
"""

from __future__ import annotations

ERC20_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "symbol",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "address", "name": "spender", "type": "address"},
        ],
        "name": "allowance",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "spender", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

# Yearn v2 vault token (yvUSDC and friends), wrapped token of the yearn linear pools.
YEARN_VAULT_ABI = ERC20_ABI + [
    {
        "inputs": [{"internalType": "uint256", "name": "maxShares", "type": "uint256"}],
        "name": "withdraw",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

_SINGLE_SWAP = {
    "components": [
        {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
        {"internalType": "enum IVault.SwapKind", "name": "kind", "type": "uint8"},
        {"internalType": "contract IAsset", "name": "assetIn", "type": "address"},
        {"internalType": "contract IAsset", "name": "assetOut", "type": "address"},
        {"internalType": "uint256", "name": "amount", "type": "uint256"},
        {"internalType": "bytes", "name": "userData", "type": "bytes"},
    ],
    "internalType": "struct IVault.SingleSwap",
    "name": "singleSwap",
    "type": "tuple",
}

_FUND_MANAGEMENT = {
    "components": [
        {"internalType": "address", "name": "sender", "type": "address"},
        {"internalType": "bool", "name": "fromInternalBalance", "type": "bool"},
        {"internalType": "address payable", "name": "recipient", "type": "address"},
        {"internalType": "bool", "name": "toInternalBalance", "type": "bool"},
    ],
    "internalType": "struct IVault.FundManagement",
    "name": "funds",
    "type": "tuple",
}

_JOIN_POOL_REQUEST = {
    "components": [
        {"internalType": "contract IAsset[]", "name": "assets", "type": "address[]"},
        {"internalType": "uint256[]", "name": "maxAmountsIn", "type": "uint256[]"},
        {"internalType": "bytes", "name": "userData", "type": "bytes"},
        {"internalType": "bool", "name": "fromInternalBalance", "type": "bool"},
    ],
    "internalType": "struct IVault.JoinPoolRequest",
    "name": "request",
    "type": "tuple",
}

_GET_ACTION_ID = {
    "inputs": [{"internalType": "bytes4", "name": "selector", "type": "bytes4"}],
    "name": "getActionId",
    "outputs": [{"internalType": "bytes32", "name": "", "type": "bytes32"}],
    "stateMutability": "view",
    "type": "function",
}

_USER_BALANCE_OP = {
    "components": [
        {"internalType": "enum IVault.UserBalanceOpKind", "name": "kind", "type": "uint8"},
        {"internalType": "contract IAsset", "name": "asset", "type": "address"},
        {"internalType": "uint256", "name": "amount", "type": "uint256"},
        {"internalType": "address", "name": "sender", "type": "address"},
        {"internalType": "address payable", "name": "recipient", "type": "address"},
    ],
    "internalType": "struct IVault.UserBalanceOp[]",
    "name": "ops",
    "type": "tuple[]",
}

VAULT_ABI = [
    _GET_ACTION_ID,
    {
        "inputs": [_USER_BALANCE_OP],
        "name": "manageUserBalance",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            _SINGLE_SWAP,
            _FUND_MANAGEMENT,
            {"internalType": "uint256", "name": "limit", "type": "uint256"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"},
        ],
        "name": "swap",
        "outputs": [{"internalType": "uint256", "name": "amountCalculated", "type": "uint256"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
            {"internalType": "address", "name": "sender", "type": "address"},
            {"internalType": "address", "name": "recipient", "type": "address"},
            _JOIN_POOL_REQUEST,
        ],
        "name": "joinPool",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "bytes32", "name": "poolId", "type": "bytes32"}],
        "name": "getPool",
        "outputs": [
            {"internalType": "address", "name": "", "type": "address"},
            {"internalType": "enum IVault.PoolSpecialization", "name": "", "type": "uint8"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "bytes32", "name": "poolId", "type": "bytes32"}],
        "name": "getPoolTokens",
        "outputs": [
            {"internalType": "contract IERC20[]", "name": "tokens", "type": "address[]"},
            {"internalType": "uint256[]", "name": "balances", "type": "uint256[]"},
            {"internalType": "uint256", "name": "lastChangeBlock", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
            {"internalType": "contract IERC20", "name": "token", "type": "address"},
        ],
        "name": "getPoolTokenInfo",
        "outputs": [
            {"internalType": "uint256", "name": "cash", "type": "uint256"},
            {"internalType": "uint256", "name": "managed", "type": "uint256"},
            {"internalType": "uint256", "name": "lastChangeBlock", "type": "uint256"},
            {"internalType": "address", "name": "assetManager", "type": "address"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getAuthorizer",
        "outputs": [{"internalType": "contract IAuthorizer", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getProtocolFeesCollector",
        "outputs": [{"internalType": "contract ProtocolFeesCollector", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "sender", "type": "address"},
            {"internalType": "address", "name": "relayer", "type": "address"},
            {"internalType": "bool", "name": "approved", "type": "bool"},
        ],
        "name": "setRelayerApproval",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

_POOL_CREATED_EVENT = {
    "anonymous": False,
    "inputs": [{"indexed": True, "internalType": "address", "name": "pool", "type": "address"}],
    "name": "PoolCreated",
    "type": "event",
}

_IS_POOL_FROM_FACTORY = {
    "inputs": [{"internalType": "address", "name": "pool", "type": "address"}],
    "name": "isPoolFromFactory",
    "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
    "stateMutability": "view",
    "type": "function",
}

WEIGHTED_POOL_FACTORY_ABI = [
    _POOL_CREATED_EVENT,
    _IS_POOL_FROM_FACTORY,
    {
        "inputs": [
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "string", "name": "symbol", "type": "string"},
            {"internalType": "contract IERC20[]", "name": "tokens", "type": "address[]"},
            {"internalType": "uint256[]", "name": "normalizedWeights", "type": "uint256[]"},
            {"internalType": "contract IRateProvider[]", "name": "rateProviders", "type": "address[]"},
            {"internalType": "uint256", "name": "swapFeePercentage", "type": "uint256"},
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "bytes32", "name": "salt", "type": "bytes32"},
        ],
        "name": "create",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

STABLE_POOL_FACTORY_ABI = [
    _POOL_CREATED_EVENT,
    _IS_POOL_FROM_FACTORY,
    {
        "inputs": [
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "string", "name": "symbol", "type": "string"},
            {"internalType": "contract IERC20[]", "name": "tokens", "type": "address[]"},
            {"internalType": "uint256", "name": "amplificationParameter", "type": "uint256"},
            {"internalType": "uint256", "name": "swapFeePercentage", "type": "uint256"},
            {"internalType": "address", "name": "owner", "type": "address"},
        ],
        "name": "create",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

LINEAR_POOL_FACTORY_ABI = [
    _POOL_CREATED_EVENT,
    _IS_POOL_FROM_FACTORY,
    {
        "inputs": [
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "string", "name": "symbol", "type": "string"},
            {"internalType": "contract IERC20", "name": "mainToken", "type": "address"},
            {"internalType": "contract IERC20", "name": "wrappedToken", "type": "address"},
            {"internalType": "uint256", "name": "upperTarget", "type": "uint256"},
            {"internalType": "uint256", "name": "swapFeePercentage", "type": "uint256"},
            {"internalType": "address", "name": "owner", "type": "address"},
        ],
        "name": "create",
        "outputs": [{"internalType": "contract LinearPool", "name": "", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

POOL_ABI = ERC20_ABI + [
    {
        "inputs": [],
        "name": "getPoolId",
        "outputs": [{"internalType": "bytes32", "name": "", "type": "bytes32"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "feeType", "type": "uint256"}],
        "name": "getProtocolFeePercentageCache",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "updateProtocolFeePercentageCache",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

LINEAR_POOL_REBALANCER_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "recipient", "type": "address"}],
        "name": "rebalance",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "recipient", "type": "address"},
            {"internalType": "uint256", "name": "extraMain", "type": "uint256"},
        ],
        "name": "rebalanceWithExtraMain",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

REAPER_MANUAL_REBALANCER_ABI = [
    {
        "inputs": [
            {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "minAmountOut", "type": "uint256"},
        ],
        "name": "wrap",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "minAmountOut", "type": "uint256"},
        ],
        "name": "unwrap",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

BATCH_RELAYER_LIBRARY_ABI = [
    {
        "anonymous": False,
        "inputs": [{"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"}],
        "name": "ChainedReferenceValueRead",
        "type": "event",
    },
    {
        "inputs": [],
        "name": "getEntrypoint",
        "outputs": [{"internalType": "contract IBalancerRelayer", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "sender", "type": "address"},
            {"internalType": "address", "name": "recipient", "type": "address"},
            {"internalType": "contract IERC20", "name": "token", "type": "address"},
            {"internalType": "uint256", "name": "poolId", "type": "uint256"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "outputReference", "type": "uint256"},
        ],
        "name": "reliquaryCreateRelicAndDeposit",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "sender", "type": "address"},
            {"internalType": "contract IERC20", "name": "token", "type": "address"},
            {"internalType": "uint256", "name": "relicId", "type": "uint256"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "outputReference", "type": "uint256"},
        ],
        "name": "reliquaryDeposit",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "recipient", "type": "address"},
            {"internalType": "uint256", "name": "relicId", "type": "uint256"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "outputReference", "type": "uint256"},
        ],
        "name": "reliquaryWithdrawAndHarvest",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "uint256[]", "name": "relicIds", "type": "uint256[]"},
            {"internalType": "address", "name": "recipient", "type": "address"},
        ],
        "name": "reliquaryHarvestAll",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    # Only present on the mock library the relayer tests deploy.
    {
        "inputs": [
            {"internalType": "uint256", "name": "ref", "type": "uint256"},
            {"internalType": "uint256", "name": "value", "type": "uint256"},
        ],
        "name": "setChainedReferenceValue",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "ref", "type": "uint256"}],
        "name": "getChainedReferenceValue",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

BALANCER_RELAYER_ABI = [
    {
        "inputs": [{"internalType": "bytes[]", "name": "data", "type": "bytes[]"}],
        "name": "multicall",
        "outputs": [{"internalType": "bytes[]", "name": "results", "type": "bytes[]"}],
        "stateMutability": "payable",
        "type": "function",
    },
]

_POSITION_INFO = {
    "components": [
        {"internalType": "uint256", "name": "amount", "type": "uint256"},
        {"internalType": "uint256", "name": "rewardDebt", "type": "uint256"},
        {"internalType": "uint256", "name": "rewardCredit", "type": "uint256"},
        {"internalType": "uint256", "name": "entry", "type": "uint256"},
        {"internalType": "uint256", "name": "poolId", "type": "uint256"},
        {"internalType": "uint256", "name": "level", "type": "uint256"},
    ],
    "internalType": "struct PositionInfo",
    "name": "position",
    "type": "tuple",
}

RELIQUARY_ABI = [
    {
        "inputs": [
            {"internalType": "uint256", "name": "allocPoint", "type": "uint256"},
            {"internalType": "contract IERC20", "name": "_poolToken", "type": "address"},
            {"internalType": "contract IRewarder", "name": "_rewarder", "type": "address"},
            {"internalType": "uint256[]", "name": "requiredMaturities", "type": "uint256[]"},
            {"internalType": "uint256[]", "name": "levelMultipliers", "type": "uint256[]"},
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "address", "name": "_nftDescriptor", "type": "address"},
        ],
        "name": "addPool",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "pid", "type": "uint256"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
        ],
        "name": "createRelicAndDeposit",
        "outputs": [{"internalType": "uint256", "name": "id", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "address", "name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "uint256", "name": "index", "type": "uint256"},
        ],
        "name": "tokenOfOwnerByIndex",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "tokenId", "type": "uint256"}],
        "name": "ownerOf",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "relicId", "type": "uint256"}],
        "name": "getPositionForId",
        "outputs": [_POSITION_INFO],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "relicId", "type": "uint256"}],
        "name": "pendingReward",
        "outputs": [{"internalType": "uint256", "name": "pending", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

PROTOCOL_FEE_PROVIDER_ABI = [
    _GET_ACTION_ID,
    {
        "inputs": [{"internalType": "uint256", "name": "feeType", "type": "uint256"}],
        "name": "getFeeTypePercentage",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "feeType", "type": "uint256"},
            {"internalType": "uint256", "name": "newValue", "type": "uint256"},
        ],
        "name": "setFeeTypePercentage",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "pool", "type": "address"},
            {"internalType": "uint256", "name": "feeType", "type": "uint256"},
            {"internalType": "uint256", "name": "newValue", "type": "uint256"},
        ],
        "name": "setFeeTypePercentageForPool",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "pool", "type": "address"},
            {"internalType": "uint256", "name": "feeType", "type": "uint256"},
        ],
        "name": "removeFeeTypePercentageForPool",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

PROTOCOL_FEES_COLLECTOR_ABI = [
    _GET_ACTION_ID,
    {
        "inputs": [{"internalType": "uint256", "name": "newSwapFeePercentage", "type": "uint256"}],
        "name": "setSwapFeePercentage",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

AUTHORIZER_ABI = [
    {
        "inputs": [],
        "name": "DEFAULT_ADMIN_ROLE",
        "outputs": [{"internalType": "bytes32", "name": "", "type": "bytes32"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "bytes32", "name": "role", "type": "bytes32"},
            {"internalType": "uint256", "name": "index", "type": "uint256"},
        ],
        "name": "getRoleMember",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "bytes32", "name": "role", "type": "bytes32"},
            {"internalType": "address", "name": "account", "type": "address"},
        ],
        "name": "grantRole",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

# ABIs used by `Task.instance_at` when a task ships no artifact for the name.
KNOWN_ABIS = {
    "IERC20": ERC20_ABI,
    "Vault": VAULT_ABI,
    "Authorizer": AUTHORIZER_ABI,
    "ProtocolFeesCollector": PROTOCOL_FEES_COLLECTOR_ABI,
    "PoolSpecificProtocolFeePercentagesProvider": PROTOCOL_FEE_PROVIDER_ABI,
    "WeightedPoolFactory": WEIGHTED_POOL_FACTORY_ABI,
    "StablePoolFactory": STABLE_POOL_FACTORY_ABI,
    "WeightedPool": POOL_ABI,
    "StablePool": POOL_ABI,
    "YearnLinearPoolFactory": LINEAR_POOL_FACTORY_ABI,
    "BooLinearPoolFactory": LINEAR_POOL_FACTORY_ABI,
    "TarotLinearPoolFactory": LINEAR_POOL_FACTORY_ABI,
    "MidasLinearPoolFactory": LINEAR_POOL_FACTORY_ABI,
    "YearnLinearPool": POOL_ABI,
    "YearnLinearPoolRebalancer": LINEAR_POOL_REBALANCER_ABI,
    "ReaperManualRebalancer": REAPER_MANUAL_REBALANCER_ABI,
    "BatchRelayerLibrary": BATCH_RELAYER_LIBRARY_ABI,
    "BalancerRelayer": BALANCER_RELAYER_ABI,
    "Reliquary": RELIQUARY_ABI,
}
