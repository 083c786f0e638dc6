"""
どこで: `engine.core` サブパッケージ。
何を: Geometry・マスク境界（Rect/PolygonPath/ArcPath）・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 形状生成とシーケンサの双方から使う計算基盤を、描画/UI から独立させるため。
"""
