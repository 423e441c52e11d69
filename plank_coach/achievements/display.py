"""
Achievement display helpers

Rarity styling lookups plus plain-text formatting for achievement lists and
unlock celebrations.
"""

from typing import Dict, Iterable, List, TypeVar, Union

from plank_coach.models import AchievementRarity

T = TypeVar('T')

RARITY_COLORS = {
    AchievementRarity.COMMON: 'text-gray-600 bg-gray-100 border-gray-200',
    AchievementRarity.UNCOMMON: 'text-green-600 bg-green-100 border-green-200',
    AchievementRarity.RARE: 'text-blue-600 bg-blue-100 border-blue-200',
    AchievementRarity.EPIC: 'text-purple-600 bg-purple-100 border-purple-200',
    AchievementRarity.LEGENDARY: 'text-yellow-600 bg-yellow-100 border-yellow-200',
}

RARITY_GLOWS = {
    AchievementRarity.COMMON: '',
    AchievementRarity.UNCOMMON: 'shadow-green-200/50',
    AchievementRarity.RARE: 'shadow-blue-200/50',
    AchievementRarity.EPIC: 'shadow-purple-200/50',
    AchievementRarity.LEGENDARY: 'shadow-yellow-200/50 shadow-lg',
}

RARITY_EMOJI = {
    AchievementRarity.COMMON: '⚪',
    AchievementRarity.UNCOMMON: '🟢',
    AchievementRarity.RARE: '🔵',
    AchievementRarity.EPIC: '🟣',
    AchievementRarity.LEGENDARY: '🌟',
}


def get_rarity_color(rarity: Union[AchievementRarity, str]) -> str:
    """Badge colour classes for a rarity"""
    return RARITY_COLORS[AchievementRarity(rarity)]


def get_rarity_glow(rarity: Union[AchievementRarity, str]) -> str:
    """Glow classes for a rarity (empty for common)"""
    return RARITY_GLOWS[AchievementRarity(rarity)]


def sort_by_rarity(achievements: Iterable[T]) -> List[T]:
    """Rarest first, then highest points, then name"""
    return sorted(
        achievements,
        key=lambda a: (-a.rarity.rank, -a.points, getattr(a, 'name', None) or a.achievement_name)
    )


def format_achievement_display(achievements_data: Dict) -> str:
    """
    Format a user's achievements as plain text

    Args:
        achievements_data: Output from AchievementEngine.get_user_achievements()

    Returns:
        Formatted string for display
    """
    unlocked = achievements_data['unlocked']
    total_unlocked = achievements_data['total_unlocked']
    total_achievements = achievements_data['total_achievements']
    total_points = achievements_data['total_points']

    if total_unlocked == 0:
        return "🏆 No achievements unlocked yet. Finish a plank to earn your first one! 💪"

    lines = [
        f"🏆 YOUR ACHIEVEMENTS ({total_unlocked}/{total_achievements})",
        f"⭐ Total points: {total_points}\n"
    ]

    by_rarity: Dict[AchievementRarity, list] = {}
    for ach in sort_by_rarity(unlocked):
        by_rarity.setdefault(ach.rarity, []).append(ach)

    for rarity, group in by_rarity.items():
        lines.append(f"{RARITY_EMOJI[rarity]} {rarity.value.upper()}")
        for ach in group:
            lines.append(f"{ach.metadata.icon} {ach.achievement_name} (+{ach.points} pts)")
        lines.append("")

    return "\n".join(lines)


def format_achievement_unlock_message(achievement) -> str:
    """
    Format an unlock celebration

    Args:
        achievement: EarnedAchievement from AchievementEngine.evaluate_and_award()

    Returns:
        Formatted celebration message
    """
    symbol = RARITY_EMOJI.get(achievement.rarity, '🏆')

    return f"""🎉 ACHIEVEMENT UNLOCKED! 🎉

{symbol} {achievement.metadata.icon} {achievement.achievement_name} {symbol}

{achievement.description}

{achievement.metadata.unlock_message}

⭐ +{achievement.points} points ({achievement.rarity.value})"""
