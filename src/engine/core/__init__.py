"""
どこで: `engine.core` サブパッケージ。
何を: 線描画レンダラへ渡すポリライン集合 `Geometry` を提供。
なぜ: マーカー記述子と描画側の境界を 1 種類の表現に統一するため。
"""
