"""
どこで: `common` パッケージ。
何を: 設定・環境変数・ロギング・型エイリアスなど、全層で使う軽量ユーティリティ。
なぜ: 幾何プリミティブやクリッピング実装から共通基盤を分離し、依存の向きを単純化するため。
"""
