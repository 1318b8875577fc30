"""アプリケーション層モジュール."""
