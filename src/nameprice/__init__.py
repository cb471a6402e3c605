"""
NamePrice - Multi-Currency Price Model for a Domain-Name Marketplace

Fixed-point price arithmetic over GAS, USD, ETH, WETH, DAI and USDC amounts,
cross-currency conversion through USD-pegged exchange rates, display
formatting with underflow/overflow sentinels, and the temporary premium
charged on recently released domains.
"""

__version__ = "1.0.0"
__author__ = "Masih Sadri"
