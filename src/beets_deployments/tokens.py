"""Per-network token tables.

Each table maps a symbolic token name to its symbol, decimals and checksummed
address. Tables are immutable; build a new one to change it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

from eth_utils import to_checksum_address


@dataclass(frozen=True)
class TokenDescriptor:
    symbol: str
    decimals: int
    address: str


class TokenTable(Mapping[str, TokenDescriptor]):
    """Read-only symbol -> TokenDescriptor mapping for one network."""

    def __init__(self, network: str, rows: Mapping[str, Mapping] | Iterable[tuple[str, Mapping]]):
        self.network = network
        items = rows.items() if isinstance(rows, Mapping) else rows

        tokens: dict[str, TokenDescriptor] = {}
        by_address: dict[str, str] = {}
        for key, row in items:
            decimals = int(row["decimals"])
            if not 0 <= decimals <= 255:
                raise ValueError(f"{network}:{key} has invalid decimals {decimals}")
            address = to_checksum_address(row["address"])
            if address in by_address:
                raise ValueError(
                    f"{network}:{key} reuses address {address} already assigned to {by_address[address]}"
                )
            by_address[address] = key
            tokens[key] = TokenDescriptor(symbol=row.get("symbol", key), decimals=decimals, address=address)

        self._tokens = tokens
        self._by_address = by_address

    def __getitem__(self, key: str) -> TokenDescriptor:
        try:
            return self._tokens[key]
        except KeyError:
            raise KeyError(f"Unknown token {key!r} on {self.network}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def address(self, key: str) -> str:
        return self[key].address

    def by_address(self, address: str) -> TokenDescriptor:
        key = self._by_address.get(to_checksum_address(address))
        if key is None:
            raise KeyError(f"No token at {address} on {self.network}")
        return self._tokens[key]


OPTIMISM_TOKENS = TokenTable(
    "optimism",
    {
        "LINK": {"symbol": "LINK", "decimals": 18, "address": "0x350a791Bfc2C21F9Ed5d10980Dad2e2638ffa7f6"},
        "WETH": {"symbol": "WETH", "decimals": 18, "address": "0x4200000000000000000000000000000000000006"},
        "OP": {"symbol": "OP", "decimals": 18, "address": "0x4200000000000000000000000000000000000042"},
        "WBTC": {"symbol": "WBTC", "decimals": 8, "address": "0x68f180fcCe6836688e9084f035309E29Bf0A2095"},
        "USDC": {"symbol": "USDC", "decimals": 6, "address": "0x7F5c764cBc14f9669B88837ca1490cCa17c31607"},
        "USDT": {"symbol": "USDT", "decimals": 6, "address": "0x94b008aA00579c1307B0EF2c499aD98a8ce58e58"},
        "DAI": {"symbol": "DAI", "decimals": 18, "address": "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1"},
        "MAI": {"symbol": "MAI", "decimals": 18, "address": "0xdFA46478F9e5EA86d57387849598dbFB2e964b02"},
        "yvUSDC": {"symbol": "yvUSDC", "decimals": 6, "address": "0x4c8b1958b09b3bde714f68864bcc3a74eaf1a23d"},
    },
)

FANTOM_TOKENS = TokenTable(
    "fantom",
    {
        "USDC": {"symbol": "USDC", "decimals": 6, "address": "0x04068DA6C83AFCFA0e13ba15A6696662335D5B75"},
        "yvUSDC": {"symbol": "yvUSDC", "decimals": 6, "address": "0xEF0210eB96c7EB36AF8ed1c20306462764935607"},
        "DAI": {"symbol": "DAI", "decimals": 18, "address": "0x8D11eC38a3EB5E956B052f67Da8Bdc9bef8Abf3E"},
        "yvDAI": {"symbol": "yvDAI", "decimals": 18, "address": "0x637eC617c86D24E421328e6CAEa1d92114892439"},
        "WFTM": {"symbol": "WFTM", "decimals": 18, "address": "0x21be370d5312f44cb42ce377bc9b8a0cef1a4c83"},
        "yvWFTM": {"symbol": "yvWFTM", "decimals": 18, "address": "0x0DEC85e74A92c52b7F708c4B10207D9560CEFaf0"},
        "BOO": {"symbol": "BOO", "decimals": 18, "address": "0x841fad6eae12c286d1fd18d1d525dffa75c7effe"},
        "xBOO": {"symbol": "xBOO", "decimals": 18, "address": "0xa48d959ae2e88f1daa7d5f611e01908106de7598"},
        "WBTC": {"symbol": "WBTC", "decimals": 8, "address": "0x321162Cd933E2Be498Cd2267a90534A804051b11"},
        "yvWBTC": {"symbol": "yvWBTC", "decimals": 8, "address": "0xd817A100AB8A29fE3DBd925c2EB489D67F758DA9"},
        "WETH": {"symbol": "WETH", "decimals": 18, "address": "0x74b23882a30290451A17c44f4F05243b6b58C76d"},
        "yvWETH": {"symbol": "yvWETH", "decimals": 18, "address": "0xCe2Fc0bDc18BD6a4d9A725791A3DEe33F3a23BB7"},
        "FRAX": {"symbol": "FRAX", "decimals": 18, "address": "0xdc301622e621166BD8E82f2cA0A26c13Ad0BE355"},
        "yvFRAX": {"symbol": "yvFRAX", "decimals": 18, "address": "0x357ca46da26E1EefC195287ce9D838A6D5023ef3"},
        "fUSDT": {"symbol": "fUSDT", "decimals": 6, "address": "0x049d68029688eAbF473097a2fC38ef61633A3C7A"},
        "yvUSDT": {"symbol": "yvUSDT", "decimals": 6, "address": "0x148c05caf1Bb09B5670f00D511718f733C54bC4c"},
        "TUSD": {"symbol": "TUSD", "decimals": 18, "address": "0x9879aBDea01a879644185341F7aF7d8343556B7a"},
        "DEI": {"symbol": "DEI", "decimals": 18, "address": "0xDE12c7959E1a72bbe8a5f7A1dc8f8EeF9Ab011B3"},
        "MOR": {"symbol": "MOR", "decimals": 18, "address": "0x22A6aC883B2f5007486C0D0EBC520747c0702Ad5"},
        "LQDR": {"symbol": "LQDR", "decimals": 18, "address": "0x10b620b2dbac4faa7d7ffd71da486f5d44cd86f9"},
        "cLQDR": {"symbol": "cLQDR", "decimals": 18, "address": "0x814c66594a22404e101FEcfECac1012D8d75C156"},
        "sFTMx": {"symbol": "sFTMx", "decimals": 18, "address": "0xd7028092c830b5C8FcE061Af2E593413EbbC1fc1"},
        "UST": {"symbol": "UST", "decimals": 6, "address": "0x846e4D51d7E2043C1a87E0Ab7490B93FB940357b"},
    },
)

MAINNET_TOKENS = TokenTable(
    "mainnet",
    {
        "UNI": {"symbol": "UNI", "decimals": 18, "address": "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"},
        "AAVE": {"symbol": "AAVE", "decimals": 18, "address": "0x7Fc66500c84A76Ad7e9c93437bFc5Ac33E2DDaE9"},
        "COMP": {"symbol": "COMP", "decimals": 18, "address": "0xc00e94cb662c3520282e6f5717214004a7f26888"},
        "wstETH": {"symbol": "wstETH", "decimals": 18, "address": "0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0"},
    },
)
