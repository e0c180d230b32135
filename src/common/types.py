"""
どこで: `common` の型定義。
何を: 2D 座標や線分の配列表現に使う軽量エイリアス。
なぜ: `geometry`/`clipping` の双方から循環なしに参照するため。
"""

import numpy as np
import numpy.typing as npt

Vec2 = tuple[float, float]
FloatArray = npt.NDArray[np.float64]
BoolArray = npt.NDArray[np.bool_]


__all__ = ["Vec2", "FloatArray", "BoolArray"]
