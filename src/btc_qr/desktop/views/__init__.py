"""Desktop views — one composer panel per payload kind."""

from btc_qr.desktop.views.descriptor import DescriptorPanel
from btc_qr.desktop.views.seed import SeedPhrasePanel
from btc_qr.desktop.views.transaction import TransactionPanel

__all__ = ["DescriptorPanel", "SeedPhrasePanel", "TransactionPanel"]
