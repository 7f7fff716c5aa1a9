"""Network configuration, built once per process and passed to whoever needs it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from eth_utils import is_address, is_hexstr, to_checksum_address

from beets_deployments.tokens import FANTOM_TOKENS, MAINNET_TOKENS, OPTIMISM_TOKENS, TokenTable


def pool_address_from_id(pool_id: str) -> str:
    """The first 20 bytes of a vault pool id are the pool's address."""
    raw = pool_id[2:] if pool_id.startswith("0x") else pool_id
    if len(raw) != 64:
        raise ValueError(f"Pool id must be 32 bytes, got {pool_id!r}")
    return to_checksum_address("0x" + raw[:40])


@dataclass(frozen=True)
class PoolRef:
    pool_id: str

    @property
    def address(self) -> str:
        return pool_address_from_id(self.pool_id)


@dataclass(frozen=True)
class NetworkConfig:
    name: str
    chain_id: int
    vault: str
    explorer_api_url: str
    tokens: TokenTable
    pools: Mapping[str, PoolRef] = field(default_factory=dict)

    def pool(self, key: str) -> PoolRef:
        try:
            return self.pools[key]
        except KeyError:
            raise KeyError(f"Unknown pool {key!r} on {self.name}") from None

    def resolve_pool_id(self, value: str) -> str:
        """Pool id for a pool key or a literal 32-byte pool id."""
        if value.startswith("0x") and len(value) == 66:
            if not is_hexstr(value):
                raise ValueError(f"Pool id must be hex, got {value!r}")
            return value.lower()
        return self.pool(value).pool_id

    def resolve_asset(self, value: str) -> str:
        """Address for a token symbol, a pool key (its BPT) or a literal address."""
        if is_address(value):
            return to_checksum_address(value)
        if value in self.tokens:
            return self.tokens.address(value)
        if value in self.pools:
            return self.pools[value].address
        raise KeyError(f"{value!r} is neither an address nor a known token or pool on {self.name}")


FANTOM_POOLS = {
    "bb-yv-USDC": PoolRef("0x3b998ba87b11a1c5bc1770de9793b17a0da61561000000000000000000000185"),
    "bb-yv-DAI": PoolRef("0x2ff1552dd09f87d6774229ee5eca60cf570ae291000000000000000000000186"),
    "bb-yv-USD": PoolRef("0x5ddb92a5340fd0ead3987d3661afcd6104c3b757000000000000000000000187"),
    "bb-yv-FTM": PoolRef("0xc3bf643799237588b7a6b407b3fc028dd4e037d200000000000000000000022d"),
    "bb-BOO": PoolRef("0x71959b131426fdb7af01de8d7d4149ccaf09f8cc0000000000000000000002e7"),
    "bb-yv-WETH": PoolRef("0x44165fad0b7ea0d54d8856765d936d7026f9e2f20000000000000000000002f8"),
    "bb-yv-WBTC": PoolRef("0x42538ce99111ea34dc2987b141bd6e9b594752d60000000000000000000002f9"),
    "bb-yv-USDT-TUSD": PoolRef("0x31adc46737ebb8e0e4a391ec6c26438badaee8ca000000000000000000000306"),
    "bpt-cLQDR": PoolRef("0xeadcfa1f34308b144e96fcd7a07145e027a8467d000000000000000000000331"),
    "bb-yv-MOR-USD": PoolRef("0xa55318e5d8b7584b8c0e5d3636545310bf9eeb8f000000000000000000000337"),
    "bb-yv-FRAX": PoolRef("0x7cf76bccfa5d3340d42f08351552f5a59dc6089c000000000000000000000396"),
    "bb-yv-FRAX-UST-USD": PoolRef("0x57793d39e8787ee6295f6a27a81b6cca68e85cdf000000000000000000000397"),
    "bb-yv-fUSDT": PoolRef("0xfe0004ca84bac1d9cf24a3270bf70be7e68e43ac0000000000000000000003c5"),
    "bb-yv-4pool": PoolRef("0x6da14f5acd58dd5c8e486cfa1dc1c550f5c61c1c0000000000000000000003cf"),
    "rf-TUSD": PoolRef("0xb85a3fc39993b2e7e6874b8700b436c212a005160000000000000000000003d0"),
    "bb-yv-DEI": PoolRef("0xdfc65c1f15ad3507754ef0fd4ba67060c108db7e000000000000000000000406"),
    "bpt-sFTMx": PoolRef("0xc0064b291bd3d4ba0e44ccfc81bf8e7f7a579cd200000000000000000000042c"),
}

OPTIMISM_POOLS = {
    "bb-rf-aUSDC": PoolRef("0xba7834bb3cd2db888e6a06fb45e82b4225cd0c71000000000000000000000043"),
}

NETWORKS = {
    "fantom": NetworkConfig(
        name="fantom",
        chain_id=250,
        vault=to_checksum_address("0x20dd72Ed959b6147912C2e529F0a0C651c33c9ce"),
        explorer_api_url="https://api.ftmscan.com/api",
        tokens=FANTOM_TOKENS,
        pools=FANTOM_POOLS,
    ),
    "optimism": NetworkConfig(
        name="optimism",
        chain_id=10,
        vault=to_checksum_address("0xBA12222222228d8Ba445958a75a0704d566BF2C8"),
        explorer_api_url="https://api-optimistic.etherscan.io/api",
        tokens=OPTIMISM_TOKENS,
        pools=OPTIMISM_POOLS,
    ),
    "mainnet": NetworkConfig(
        name="mainnet",
        chain_id=1,
        vault=to_checksum_address("0xBA12222222228d8Ba445958a75a0704d566BF2C8"),
        explorer_api_url="https://api.etherscan.io/api",
        tokens=MAINNET_TOKENS,
    ),
}


def load_network(name: str) -> NetworkConfig:
    try:
        return NETWORKS[name]
    except KeyError:
        raise KeyError(f"Unknown network {name!r}; expected one of {', '.join(sorted(NETWORKS))}") from None
