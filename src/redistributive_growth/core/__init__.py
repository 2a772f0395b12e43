"""モデルのコア計算"""
