"""
どこで: `api.ui_runner`。
何を: `api.runner.run_ui` の補助（設定解決の純関数と、ウィンドウ/GL 初期化）。
なぜ: `run_ui` 本体を薄く保ち、設定解決を GPU 無しでテストできるようにするため。
"""
