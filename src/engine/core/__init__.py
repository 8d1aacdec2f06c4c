"""
どこで: `engine.core` サブパッケージ。
何を: 値型（Vector/Quaternion）・フレーム駆動（Tickable/FrameClock）・描画ウィンドウを提供。
なぜ: シーン/UI/描画の各層が共有する最下層の基盤を分離するため。
"""
