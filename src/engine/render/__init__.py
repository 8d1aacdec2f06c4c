"""
どこで: `engine.render` サブパッケージ。
何を: シーングラフ → GPU 転送・描画の入口。UIRenderer/QuadMesh/Shader を提供。
なぜ: UI 変換（engine.ui）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
