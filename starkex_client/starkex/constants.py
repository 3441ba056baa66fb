"""
StarkEx protocol constants and default asset tables.

More info on quantums and resolutions:
https://docs.starkware.co/starkex-v3/starkex-deep-dive/starkex-specific-concepts
"""

# Networks
NETWORK_ID_MAINNET = 1
NETWORK_ID_ROPSTEN = 3
NETWORK_ID_GOERLI = 5

# Markets
MARKET_BTC_USD = "BTC-USD"
MARKET_ETH_USD = "ETH-USD"
MARKET_LINK_USD = "LINK-USD"
MARKET_AAVE_USD = "AAVE-USD"
MARKET_UNI_USD = "UNI-USD"
MARKET_SUSHI_USD = "SUSHI-USD"
MARKET_SOL_USD = "SOL-USD"
MARKET_YFI_USD = "YFI-USD"
MARKET_ONEINCH_USD = "1INCH-USD"
MARKET_AVAX_USD = "AVAX-USD"
MARKET_SNX_USD = "SNX-USD"
MARKET_CRV_USD = "CRV-USD"
MARKET_UMA_USD = "UMA-USD"
MARKET_DOT_USD = "DOT-USD"
MARKET_DOGE_USD = "DOGE-USD"
MARKET_MATIC_USD = "MATIC-USD"
MARKET_MKR_USD = "MKR-USD"
MARKET_FIL_USD = "FIL-USD"
MARKET_ADA_USD = "ADA-USD"
MARKET_ATOM_USD = "ATOM-USD"
MARKET_COMP_USD = "COMP-USD"
MARKET_BCH_USD = "BCH-USD"
MARKET_LTC_USD = "LTC-USD"
MARKET_EOS_USD = "EOS-USD"
MARKET_ALGO_USD = "ALGO-USD"
MARKET_ZRX_USD = "ZRX-USD"
MARKET_XMR_USD = "XMR-USD"
MARKET_ZEC_USD = "ZEC-USD"
MARKET_ENJ_USD = "ENJ-USD"
MARKET_ETC_USD = "ETC-USD"
MARKET_XLM_USD = "XLM-USD"
MARKET_TRX_USD = "TRX-USD"
MARKET_XTZ_USD = "XTZ-USD"
MARKET_ICP_USD = "ICP-USD"
MARKET_RUNE_USD = "RUNE-USD"
MARKET_LUNA_USD = "LUNA-USD"
MARKET_NEAR_USD = "NEAR-USD"
MARKET_CELO_USD = "CELO-USD"

# Assets
ASSET_USDC = "USDC"
ASSET_BTC = "BTC"
ASSET_ETH = "ETH"
ASSET_LINK = "LINK"
ASSET_AAVE = "AAVE"
ASSET_UNI = "UNI"
ASSET_SUSHI = "SUSHI"
ASSET_SOL = "SOL"
ASSET_YFI = "YFI"
ASSET_ONEINCH = "1INCH"
ASSET_AVAX = "AVAX"
ASSET_SNX = "SNX"
ASSET_CRV = "CRV"
ASSET_UMA = "UMA"
ASSET_DOT = "DOT"
ASSET_DOGE = "DOGE"
ASSET_MATIC = "MATIC"
ASSET_MKR = "MKR"
ASSET_FIL = "FIL"
ASSET_ADA = "ADA"
ASSET_ATOM = "ATOM"
ASSET_COMP = "COMP"
ASSET_BCH = "BCH"
ASSET_LTC = "LTC"
ASSET_EOS = "EOS"
ASSET_ALGO = "ALGO"
ASSET_ZRX = "ZRX"
ASSET_XMR = "XMR"
ASSET_ZEC = "ZEC"
ASSET_ENJ = "ENJ"
ASSET_ETC = "ETC"
ASSET_XLM = "XLM"
ASSET_TRX = "TRX"
ASSET_XTZ = "XTZ"
ASSET_ICP = "ICP"
ASSET_RUNE = "RUNE"
ASSET_LUNA = "LUNA"
ASSET_NEAR = "NEAR"
ASSET_CELO = "CELO"

COLLATERAL_ASSET = ASSET_USDC

SYNTHETIC_ASSET_MAP = {
    MARKET_BTC_USD: ASSET_BTC,
    MARKET_ETH_USD: ASSET_ETH,
    MARKET_LINK_USD: ASSET_LINK,
    MARKET_AAVE_USD: ASSET_AAVE,
    MARKET_UNI_USD: ASSET_UNI,
    MARKET_SUSHI_USD: ASSET_SUSHI,
    MARKET_SOL_USD: ASSET_SOL,
    MARKET_YFI_USD: ASSET_YFI,
    MARKET_ONEINCH_USD: ASSET_ONEINCH,
    MARKET_AVAX_USD: ASSET_AVAX,
    MARKET_SNX_USD: ASSET_SNX,
    MARKET_CRV_USD: ASSET_CRV,
    MARKET_UMA_USD: ASSET_UMA,
    MARKET_DOT_USD: ASSET_DOT,
    MARKET_DOGE_USD: ASSET_DOGE,
    MARKET_MATIC_USD: ASSET_MATIC,
    MARKET_MKR_USD: ASSET_MKR,
    MARKET_FIL_USD: ASSET_FIL,
    MARKET_ADA_USD: ASSET_ADA,
    MARKET_ATOM_USD: ASSET_ATOM,
    MARKET_COMP_USD: ASSET_COMP,
    MARKET_BCH_USD: ASSET_BCH,
    MARKET_LTC_USD: ASSET_LTC,
    MARKET_EOS_USD: ASSET_EOS,
    MARKET_ALGO_USD: ASSET_ALGO,
    MARKET_ZRX_USD: ASSET_ZRX,
    MARKET_XMR_USD: ASSET_XMR,
    MARKET_ZEC_USD: ASSET_ZEC,
    MARKET_ENJ_USD: ASSET_ENJ,
    MARKET_ETC_USD: ASSET_ETC,
    MARKET_XLM_USD: ASSET_XLM,
    MARKET_TRX_USD: ASSET_TRX,
    MARKET_XTZ_USD: ASSET_XTZ,
    MARKET_ICP_USD: ASSET_ICP,
    MARKET_RUNE_USD: ASSET_RUNE,
    MARKET_LUNA_USD: ASSET_LUNA,
    MARKET_NEAR_USD: ASSET_NEAR,
    MARKET_CELO_USD: ASSET_CELO,
}

# Power-of-ten exponent: quantums = human amount * 10 ** resolution
ASSET_RESOLUTION = {
    ASSET_USDC: 6,
    ASSET_BTC: 10,
    ASSET_ETH: 9,
    ASSET_LINK: 7,
    ASSET_AAVE: 8,
    ASSET_UNI: 7,
    ASSET_SUSHI: 7,
    ASSET_SOL: 7,
    ASSET_YFI: 10,
    ASSET_ONEINCH: 7,
    ASSET_AVAX: 7,
    ASSET_SNX: 7,
    ASSET_CRV: 6,
    ASSET_UMA: 7,
    ASSET_DOT: 7,
    ASSET_DOGE: 5,
    ASSET_MATIC: 6,
    ASSET_MKR: 9,
    ASSET_FIL: 7,
    ASSET_ADA: 6,
    ASSET_ATOM: 7,
    ASSET_COMP: 8,
    ASSET_BCH: 8,
    ASSET_LTC: 8,
    ASSET_EOS: 6,
    ASSET_ALGO: 6,
    ASSET_ZRX: 6,
    ASSET_XMR: 8,
    ASSET_ZEC: 8,
    ASSET_ENJ: 6,
    ASSET_ETC: 7,
    ASSET_XLM: 5,
    ASSET_TRX: 4,
    ASSET_XTZ: 6,
    ASSET_ICP: 7,
    ASSET_RUNE: 6,
    ASSET_LUNA: 6,
    ASSET_NEAR: 6,
    ASSET_CELO: 6,
}

# Synthetic asset ids are the ASCII "<ASSET>-<resolution>" left-aligned in 15 bytes
SYNTHETIC_ASSET_ID_MAP = {
    ASSET_BTC: "0x4254432d3130000000000000000000",
    ASSET_ETH: "0x4554482d3900000000000000000000",
    ASSET_LINK: "0x4c494e4b2d37000000000000000000",
    ASSET_AAVE: "0x414156452d38000000000000000000",
    ASSET_UNI: "0x554e492d3700000000000000000000",
    ASSET_SUSHI: "0x53555348492d370000000000000000",
    ASSET_SOL: "0x534f4c2d3700000000000000000000",
    ASSET_YFI: "0x5946492d3130000000000000000000",
    ASSET_ONEINCH: "0x31494e43482d370000000000000000",
    ASSET_AVAX: "0x415641582d37000000000000000000",
    ASSET_SNX: "0x534e582d3700000000000000000000",
    ASSET_CRV: "0x4352562d3600000000000000000000",
    ASSET_UMA: "0x554d412d3700000000000000000000",
    ASSET_DOT: "0x444f542d3700000000000000000000",
    ASSET_DOGE: "0x444f47452d35000000000000000000",
    ASSET_MATIC: "0x4d415449432d360000000000000000",
    ASSET_MKR: "0x4d4b522d3900000000000000000000",
    ASSET_FIL: "0x46494c2d3700000000000000000000",
    ASSET_ADA: "0x4144412d3600000000000000000000",
    ASSET_ATOM: "0x41544f4d2d37000000000000000000",
    ASSET_COMP: "0x434f4d502d38000000000000000000",
    ASSET_BCH: "0x4243482d3800000000000000000000",
    ASSET_LTC: "0x4c54432d3800000000000000000000",
    ASSET_EOS: "0x454f532d3600000000000000000000",
    ASSET_ALGO: "0x414c474f2d36000000000000000000",
    ASSET_ZRX: "0x5a52582d3600000000000000000000",
    ASSET_XMR: "0x584d522d3800000000000000000000",
    ASSET_ZEC: "0x5a45432d3800000000000000000000",
    ASSET_ENJ: "0x454e4a2d3600000000000000000000",
    ASSET_ETC: "0x4554432d3700000000000000000000",
    ASSET_XLM: "0x584c4d2d3500000000000000000000",
    ASSET_TRX: "0x5452582d3400000000000000000000",
    ASSET_XTZ: "0x58545a2d3600000000000000000000",
    ASSET_ICP: "0x4943502d3700000000000000000000",
    ASSET_RUNE: "0x52554e452d36000000000000000000",
    ASSET_LUNA: "0x4c554e412d36000000000000000000",
    ASSET_NEAR: "0x4e4541522d36000000000000000000",
    ASSET_CELO: "0x43454c4f2d36000000000000000000",
}

COLLATERAL_ASSET_ID_BY_NETWORK_ID = {
    NETWORK_ID_MAINNET: "0x02893294412a4c8f915f75892b395ebbf6859ec246ec365c3b1f56f47c3a0a5d",
    NETWORK_ID_ROPSTEN: "0x02c04d8b650f44092278a7cb1e1028c82025dff622db96c934b611b84cc8de5a",
    NETWORK_ID_GOERLI: "0x03bda2b4764039f2df44a00a9cf1d1569a83f95406a983ce4beb95791c376008",
}

# Order signing
ORDER_TYPE_LIMIT_WITH_FEES = "LIMIT_ORDER_WITH_FEES"
ONE_HOUR_IN_SECONDS = 60 * 60
ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS = 24 * 7  # Seven days.
LIMIT_FEE_DECIMALS = 6
NONCE_UPPER_BOUND_EXCLUSIVE = 1 << 32

# Settlement-layer message packing
ORDER_PREFIX = 3
ORDER_PADDING_BITS = 17
ORDER_FIELD_BIT_LENGTHS = {
    "asset_id_synthetic": 128,
    "asset_id_collateral": 250,
    "asset_id_fee": 250,
    "quantums_amount": 64,
    "nonce": 32,
    "position_id": 64,
    "expiration_epoch_hours": 32,
}
