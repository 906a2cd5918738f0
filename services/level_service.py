"""
等級服務：由經驗值推導 level 與 untilNextLevel

純計算邏輯，公式：
    level = floor((sqrt(2500 + 200 * experience) - 50) / 100)
    untilNextLevel = 50 * (level + 1) * (level + 2) - experience
"""
import math
from typing import Tuple


def calculate_level(experience: int) -> int:
    """
    計算目前等級

    範例：
        calculate_level(0) -> 0
        calculate_level(99) -> 0
        calculate_level(100) -> 1
        calculate_level(300) -> 2
    """
    return math.floor((math.sqrt(2500 + 200 * experience) - 50) / 100)


def calculate_until_next_level(level: int, experience: int) -> int:
    """升到下一級還需要的經驗值"""
    return 50 * (level + 1) * (level + 2) - experience


def calculate_level_stats(experience: int) -> Tuple[int, int]:
    """
    一次算出 (level, until_next_level)

    參數：
        experience: 經驗值（>= 0）

    返回：
        (level, until_next_level) tuple
    """
    level = calculate_level(experience)
    return level, calculate_until_next_level(level, experience)


def apply_level_stats(player) -> None:
    """
    依 player.experience 重新計算並寫回 level / until_next_level

    副作用：
        修改 player.level、player.until_next_level
    """
    player.level, player.until_next_level = calculate_level_stats(player.experience)
