"""
どこで: `common` パッケージ。
何を: 環境変数パース/設定スナップショット/ロギング初期化などの横断的な基盤。
なぜ: `tonematrix` ドメイン層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
