"""
Achievement definitions

Static entries for the general, seasonal and hidden achievements, plus
template generators for the per-exercise-category and cross-category tiers. Each entry is defined once;
`build_default_catalog()` in catalog.py validates the whole set.
"""

from typing import Any, Dict, List

from plank_coach.models import ExerciseCategory

HASHTAG = "#PlankCoach"


# =============================================================================
# General achievements
# =============================================================================

CONSISTENCY_ACHIEVEMENTS: List[Dict[str, Any]] = [
    {
        "id": "daily_warrior", "name": "Daily Warrior", "icon": "⚔️",
        "description": "7 consecutive days of workouts",
        "category": "consistency", "rarity": "common", "points": 50,
        "badge_color": "from-orange-400 to-red-500",
        "requirement": {"type": "streak", "value": 7},
        "unlock_message": "Seven days strong! You're building an unstoppable habit!",
        "share_message": f"Just completed a 7-day workout streak! 💪 {HASHTAG}",
    },
    {
        "id": "habit_builder", "name": "Habit Builder", "icon": "🏗️",
        "description": "14 consecutive days of workouts",
        "category": "consistency", "rarity": "uncommon", "points": 100,
        "badge_color": "from-blue-400 to-purple-500",
        "requirement": {"type": "streak", "value": 14},
        "unlock_message": "Two weeks of dedication! You're building something amazing!",
        "share_message": f"Two weeks of consistent workouts completed! 🔥 {HASHTAG}",
    },
    {
        "id": "unstoppable", "name": "Unstoppable", "icon": "🌟",
        "description": "30 consecutive days of workouts",
        "category": "consistency", "rarity": "rare", "points": 250,
        "badge_color": "from-purple-400 to-pink-500",
        "requirement": {"type": "streak", "value": 30},
        "unlock_message": "One month of pure dedication! You are truly unstoppable!",
        "share_message": f"Achieved a 30-day workout streak! Unstoppable! 🌟 {HASHTAG}",
    },
    {
        "id": "legend", "name": "Legend", "icon": "👑",
        "description": "100 consecutive days of workouts",
        "category": "consistency", "rarity": "legendary", "points": 1000,
        "badge_color": "from-yellow-400 to-orange-500",
        "requirement": {"type": "streak", "value": 100},
        "unlock_message": "ONE HUNDRED DAYS! You are a true fitness legend!",
        "share_message": f"100-day workout streak achieved! I am a fitness legend! 👑 {HASHTAG}",
    },
    {
        "id": "weekend_warrior", "name": "Weekend Warrior", "icon": "🏃‍♂️",
        "description": "10 weekend workouts completed",
        "category": "consistency", "rarity": "uncommon", "points": 75,
        "badge_color": "from-green-400 to-blue-500",
        "requirement": {"type": "time_of_day", "value": 10, "window": "weekend"},
        "unlock_message": "Weekend dedication pays off! You never skip the important days!",
        "share_message": f"Completed 10 weekend workouts! Weekend warrior mode activated! 🏃‍♂️ {HASHTAG}",
    },
    {
        "id": "early_bird", "name": "Early Bird", "icon": "🌅",
        "description": "20 morning workouts (before 9 AM)",
        "category": "consistency", "rarity": "rare", "points": 150,
        "badge_color": "from-yellow-300 to-orange-400",
        "requirement": {"type": "time_of_day", "value": 20, "window": "morning"},
        "unlock_message": "Rise and grind! You've mastered the art of morning workouts!",
        "share_message": f"20 morning workouts completed! Early bird gets the gains! 🌅 {HASHTAG}",
    },
    {
        "id": "night_owl", "name": "Night Owl", "icon": "🦉",
        "description": "20 evening workouts (after 7 PM)",
        "category": "consistency", "rarity": "rare", "points": 150,
        "badge_color": "from-indigo-400 to-purple-600",
        "requirement": {"type": "time_of_day", "value": 20, "window": "evening"},
        "unlock_message": "Night time is the right time! You own the evening hours!",
        "share_message": f"20 evening workouts completed! Night owl strength! 🦉 {HASHTAG}",
    },
]

PERFORMANCE_ACHIEVEMENTS: List[Dict[str, Any]] = [
    {
        "id": "quick_start", "name": "Quick Start", "icon": "⚡",
        "description": "Complete a 15-second plank",
        "category": "performance", "rarity": "common", "points": 10,
        "badge_color": "from-green-300 to-green-500",
        "requirement": {"type": "duration", "value": 15},
        "unlock_message": "Every journey begins with a single step! Great start!",
        "share_message": f"Started my plank journey with 15 seconds! ⚡ {HASHTAG}",
    },
    {
        "id": "half_minute_hero", "name": "Half Minute Hero", "icon": "🦸‍♂️",
        "description": "Complete a 30-second plank",
        "category": "performance", "rarity": "common", "points": 25,
        "badge_color": "from-blue-300 to-blue-500",
        "requirement": {"type": "duration", "value": 30},
        "unlock_message": "Thirty seconds of pure strength! You're a hero in the making!",
        "share_message": f"Held a 30-second plank! Half minute hero! 🦸‍♂️ {HASHTAG}",
    },
    {
        "id": "minute_master", "name": "Minute Master", "icon": "⏱️",
        "description": "Complete a 60-second plank",
        "category": "performance", "rarity": "uncommon", "points": 50,
        "badge_color": "from-purple-300 to-purple-500",
        "requirement": {"type": "duration", "value": 60},
        "unlock_message": "One full minute! You've mastered the fundamental challenge!",
        "share_message": f"Achieved a 60-second plank! Minute master unlocked! ⏱️ {HASHTAG}",
    },
    {
        "id": "endurance_expert", "name": "Endurance Expert", "icon": "💪",
        "description": "Complete a 2-minute plank",
        "category": "performance", "rarity": "rare", "points": 100,
        "badge_color": "from-red-400 to-pink-500",
        "requirement": {"type": "duration", "value": 120},
        "unlock_message": "Two minutes of unwavering strength! You are an endurance expert!",
        "share_message": f"Crushed a 2-minute plank! Endurance expert level! 💪 {HASHTAG}",
    },
    {
        "id": "iron_core", "name": "Iron Core", "icon": "🛡️",
        "description": "Complete a 5-minute plank",
        "category": "performance", "rarity": "epic", "points": 300,
        "badge_color": "from-gray-400 to-gray-600",
        "requirement": {"type": "duration", "value": 300},
        "unlock_message": "FIVE MINUTES! Your core is forged from iron!",
        "share_message": f"Held a 5-minute plank! My core is made of iron! 🛡️ {HASHTAG}",
    },
    {
        "id": "personal_best", "name": "Personal Best", "icon": "📈",
        "description": "Beat your first session by 30+ seconds",
        "category": "performance", "rarity": "uncommon", "points": 75,
        "badge_color": "from-green-400 to-emerald-500",
        "requirement": {"type": "improvement", "value": 30},
        "unlock_message": "Amazing improvement! You're getting stronger every day!",
        "share_message": f"Just beat my personal best by 30+ seconds! 📈 {HASHTAG}",
    },
    {
        "id": "double_down", "name": "Double Down", "icon": "🎯",
        "description": "Double your initial time",
        "category": "performance", "rarity": "rare", "points": 200,
        "badge_color": "from-orange-400 to-red-500",
        "requirement": {"type": "improvement", "value": 100, "doubling": True},
        "unlock_message": "You've DOUBLED your strength! Incredible progress!",
        "share_message": f"Doubled my initial plank time! Progress is real! 🎯 {HASHTAG}",
    },
]

EXPLORATION_ACHIEVEMENTS: List[Dict[str, Any]] = [
    {
        "id": "exercise_explorer", "name": "Exercise Explorer", "icon": "🗺️",
        "description": "Try 5 different exercises",
        "category": "exploration", "rarity": "uncommon", "points": 100,
        "badge_color": "from-teal-400 to-cyan-500",
        "requirement": {"type": "variety", "value": 5},
        "unlock_message": "Adventure calls! You've explored five different exercises!",
        "share_message": f"Explored 5 different exercises! Adventure mode activated! 🗺️ {HASHTAG}",
    },
    {
        "id": "variety_seeker", "name": "Variety Seeker", "icon": "🎭",
        "description": "Complete 5 different exercises in a week",
        "category": "exploration", "rarity": "uncommon", "points": 75,
        "badge_color": "from-pink-400 to-rose-500",
        "requirement": {"type": "variety", "value": 5, "within_days": 7},
        "unlock_message": "Variety is the spice of fitness! You love to mix things up!",
        "share_message": f"Completed 5 different exercises this week! Variety seeker! 🎭 {HASHTAG}",
    },
]

MILESTONE_ACHIEVEMENTS: List[Dict[str, Any]] = [
    {
        "id": "getting_started", "name": "Getting Started", "icon": "🚀",
        "description": "Complete 10 total workouts",
        "category": "milestone", "rarity": "common", "points": 50,
        "badge_color": "from-cyan-300 to-blue-400",
        "requirement": {"type": "count", "value": 10},
        "unlock_message": "Ten workouts complete! Your fitness journey is officially launched!",
        "share_message": f"Completed my first 10 workouts! Getting started! 🚀 {HASHTAG}",
    },
    {
        "id": "committed", "name": "Committed", "icon": "🎖️",
        "description": "Complete 25 total workouts",
        "category": "milestone", "rarity": "uncommon", "points": 100,
        "badge_color": "from-emerald-400 to-green-500",
        "requirement": {"type": "count", "value": 25},
        "unlock_message": "Twenty-five workouts! Your commitment is showing real results!",
        "share_message": f"25 workouts completed! Commitment level: unlocked! 🎖️ {HASHTAG}",
    },
    {
        "id": "dedicated", "name": "Dedicated", "icon": "🏅",
        "description": "Complete 50 total workouts",
        "category": "milestone", "rarity": "rare", "points": 200,
        "badge_color": "from-amber-400 to-orange-500",
        "requirement": {"type": "count", "value": 50},
        "unlock_message": "Fifty workouts! Your dedication is truly inspiring!",
        "share_message": f"Reached 50 total workouts! Dedication pays off! 🏅 {HASHTAG}",
    },
    {
        "id": "expert", "name": "Expert", "icon": "🏆",
        "description": "Complete 100 total workouts",
        "category": "milestone", "rarity": "epic", "points": 500,
        "badge_color": "from-yellow-400 to-amber-500",
        "requirement": {"type": "count", "value": 100},
        "unlock_message": "ONE HUNDRED WORKOUTS! You are officially a plank expert!",
        "share_message": f"100 workouts completed! Expert status achieved! 🏆 {HASHTAG}",
    },
    {
        "id": "master", "name": "Master", "icon": "💎",
        "description": "Complete 365 total workouts",
        "category": "milestone", "rarity": "legendary", "points": 1500,
        "badge_color": "from-indigo-500 to-purple-600",
        "requirement": {"type": "count", "value": 365},
        "unlock_message": "THREE SIXTY-FIVE! You are a true plank master! Legendary status!",
        "share_message": f"365 workouts completed! I am a plank master! 💎 {HASHTAG}",
    },
    {
        "id": "time_warrior", "name": "Time Warrior", "icon": "⏰",
        "description": "Accumulate 1 hour of total plank time",
        "category": "milestone", "rarity": "uncommon", "points": 100,
        "badge_color": "from-red-400 to-rose-500",
        "requirement": {"type": "total_time", "value": 3600},
        "unlock_message": "One full hour of planking! You are a time warrior!",
        "share_message": f"Accumulated 1 hour of total plank time! Time warrior! ⏰ {HASHTAG}",
    },
    {
        "id": "endurance_champion", "name": "Endurance Champion", "icon": "🌟",
        "description": "Accumulate 10 hours of total plank time",
        "category": "milestone", "rarity": "epic", "points": 750,
        "badge_color": "from-purple-500 to-pink-600",
        "requirement": {"type": "total_time", "value": 36000},
        "unlock_message": "TEN HOURS! You are the ultimate endurance champion!",
        "share_message": f"10 hours of total plank time! Endurance champion! 🌟 {HASHTAG}",
    },
]


# =============================================================================
# Per-exercise-category achievements (8 tiers x 6 categories)
# =============================================================================

# label, icon, gradient start colour, gradient end colour
EXERCISE_CATEGORY_STYLES: Dict[ExerciseCategory, tuple[str, str, str, str]] = {
    ExerciseCategory.CARDIO: ("Cardio", "❤️", "red", "pink"),
    ExerciseCategory.LEG_LIFT: ("Leg Lift", "🦵", "blue", "cyan"),
    ExerciseCategory.PLANKING: ("Planking", "🧱", "orange", "amber"),
    ExerciseCategory.SEATED_EXERCISE: ("Seated Exercise", "🪑", "green", "emerald"),
    ExerciseCategory.STANDING_MOVEMENT: ("Standing Movement", "🚶", "yellow", "lime"),
    ExerciseCategory.STRENGTH: ("Strength", "💪", "purple", "violet"),
}

# id suffix, name suffix, description, icon (None = category icon), rarity,
# points, requirement fields, gradient shades, unlock message, share message
CATEGORY_TIERS: List[Dict[str, Any]] = [
    {
        "id": "starter", "name": "Starter", "icon": None,
        "description": "Complete your first {noun} exercise",
        "rarity": "common", "points": 25, "shades": (400, 500),
        "requirement": {"metric": "sessions", "value": 1},
        "unlock_message": "First {noun} exercise completed! A new path opens up!",
        "share_message": "Started my {noun} journey! {icon}",
    },
    {
        "id": "streak_7", "name": "Week", "icon": "📆",
        "description": "7-day {noun} exercise streak",
        "rarity": "uncommon", "points": 75, "shades": (500, 600),
        "requirement": {"metric": "streak_days", "value": 7},
        "unlock_message": "One week of {noun} dedication! Keep the rhythm going!",
        "share_message": "7-day {noun} streak completed! 📆",
    },
    {
        "id": "25_sessions", "name": "Enthusiast", "icon": "🎖️",
        "description": "Complete 25 {noun} sessions",
        "rarity": "uncommon", "points": 100, "shades": (400, 500),
        "requirement": {"metric": "sessions", "value": 25},
        "unlock_message": "Twenty-five {noun} sessions! You are a {noun} enthusiast!",
        "share_message": "25 {noun} sessions completed! Enthusiast level! 🎖️",
    },
    {
        "id": "lifetime_60min", "name": "Hour", "icon": "⏰",
        "description": "Accumulate 60 minutes of {noun} exercises",
        "rarity": "rare", "points": 150, "shades": (600, 700),
        "requirement": {"metric": "seconds", "value": 3600},
        "unlock_message": "One full hour of {noun}! Your endurance is amazing!",
        "share_message": "60 minutes of {noun} completed! ⏰",
    },
    {
        "id": "consistency_21", "name": "Consistent", "icon": "📅",
        "description": "Do {noun} exercises on 21 days within a month",
        "rarity": "rare", "points": 200, "shades": (500, 600),
        "requirement": {"metric": "active_days", "value": 21, "within_days": 30},
        "unlock_message": "Incredible {noun} consistency! 21 days in a month!",
        "share_message": "21 {noun} days this month! 📅",
    },
    {
        "id": "streak_30", "name": "Month", "icon": "🔥",
        "description": "30-day {noun} exercise streak",
        "rarity": "epic", "points": 300, "shades": (700, 800),
        "requirement": {"metric": "streak_days", "value": 30},
        "unlock_message": "THIRTY DAYS of {noun}! You are on fire!",
        "share_message": "30-day {noun} streak! I am on fire! 🔥",
    },
    {
        "id": "mastery_100", "name": "Master", "icon": "👑",
        "description": "Complete 100 {noun} sessions",
        "rarity": "epic", "points": 500, "shades": (800, 900),
        "requirement": {"metric": "sessions", "value": 100},
        "unlock_message": "ONE HUNDRED {noun} sessions! You are a {noun} master!",
        "share_message": "100 {noun} sessions! Master achieved! 👑",
    },
    {
        "id": "lifetime_300min", "name": "Legend", "icon": "🏆",
        "description": "Accumulate 5 hours (300 minutes) of {noun} exercises",
        "rarity": "legendary", "points": 750, "shades": (900, 900),
        "requirement": {"metric": "seconds", "value": 18000},
        "unlock_message": "FIVE HOURS of {noun}! You are a {noun} legend!",
        "share_message": "5 hours of {noun} completed! Legend status! 🏆",
    },
]


def generate_category_achievements() -> List[Dict[str, Any]]:
    """One entry per (exercise category, tier)"""
    entries = []
    for exercise_category, (label, category_icon, start, end) in EXERCISE_CATEGORY_STYLES.items():
        noun = label.lower()
        for tier in CATEGORY_TIERS:
            icon = tier["icon"] or category_icon
            low, high = tier["shades"]
            entries.append({
                "id": f"{exercise_category.value}_{tier['id']}",
                "name": f"{label} {tier['name']}",
                "description": tier["description"].format(noun=noun),
                "category": "category_specific",
                "icon": icon,
                "badge_color": f"from-{start}-{low} to-{end}-{high}",
                "rarity": tier["rarity"],
                "points": tier["points"],
                "requirement": {
                    "type": "category_specific",
                    "exercise_category": exercise_category.value,
                    **tier["requirement"],
                },
                "unlock_message": tier["unlock_message"].format(noun=noun),
                "share_message": f"{tier['share_message'].format(noun=noun, icon=icon)} {HASHTAG}",
            })
    return entries


# =============================================================================
# Cross-category achievements
# =============================================================================

# (minimum categories, id, name, icon, rarity, points, badge colour)
EXPLORER_TIERS = [
    (2, "category_explorer_2", "Category Explorer", "🗺️", "common", 50, "from-teal-400 to-cyan-500"),
    (3, "category_explorer_3", "Multi-Category Adventurer", "🎒", "uncommon", 100, "from-teal-500 to-blue-600"),
    (4, "category_explorer_4", "Fitness Wanderer", "🧭", "rare", 200, "from-blue-500 to-indigo-600"),
    (5, "category_explorer_5", "Fitness Explorer", "🏔️", "epic", 400, "from-indigo-500 to-purple-600"),
    (6, "category_explorer_all", "Complete Fitness Explorer", "🌍", "legendary", 800, "from-purple-600 to-pink-700"),
]

SAME_DAY_TIERS = [
    (2, "same_day_2_categories", "Daily Variety", "🌅", "uncommon", 75, "from-pink-400 to-rose-500"),
    (3, "same_day_3_categories", "Triple Threat", "🎯", "rare", 150, "from-rose-400 to-pink-600"),
    (4, "same_day_4_categories", "Quadruple Power", "💥", "epic", 300, "from-pink-500 to-purple-700"),
    (5, "same_day_5_categories", "Fitness Tornado", "🌪️", "epic", 500, "from-purple-600 to-indigo-800"),
    (6, "same_day_all_categories", "Fitness Hurricane", "🌀", "legendary", 1000, "from-indigo-700 to-purple-900"),
]

SAME_WEEK_TIERS = [
    (3, "same_week_3_categories", "Weekly Mix", "🎨", "uncommon", 75, "from-lime-400 to-green-500"),
    (4, "same_week_4_categories", "Weekly Medley", "🎼", "rare", 150, "from-green-500 to-teal-600"),
    (6, "same_week_all_categories", "Weekly Grand Tour", "🎡", "epic", 400, "from-teal-600 to-cyan-800"),
]

# (id, name, categories, icon, rarity, points, badge colour); earned within one week
COMBINATIONS = [
    ("combo_heart_and_core", "Heart and Core",
     (ExerciseCategory.CARDIO, ExerciseCategory.PLANKING), "💞", "uncommon", 100, "from-red-400 to-orange-500"),
    ("combo_lower_body", "Lower Body Blend",
     (ExerciseCategory.LEG_LIFT, ExerciseCategory.STANDING_MOVEMENT), "🦿", "uncommon", 100, "from-blue-400 to-lime-500"),
    ("combo_gentle_mix", "Gentle Mix",
     (ExerciseCategory.SEATED_EXERCISE, ExerciseCategory.STANDING_MOVEMENT), "🌿", "common", 50, "from-emerald-300 to-lime-400"),
    ("combo_strength_and_stamina", "Strength and Stamina",
     (ExerciseCategory.STRENGTH, ExerciseCategory.CARDIO, ExerciseCategory.PLANKING), "⚙️", "rare", 200, "from-purple-500 to-red-600"),
]


def _count_phrase(value: int) -> str:
    return f"all {value}" if value == len(ExerciseCategory) else str(value)


def generate_cross_category_achievements() -> List[Dict[str, Any]]:
    """Explorer, same-day, same-week and combination entries"""
    entries = []

    for value, achievement_id, name, icon, rarity, points, color in EXPLORER_TIERS:
        count = _count_phrase(value)
        entries.append({
            "id": achievement_id, "name": name, "icon": icon,
            "description": f"Complete exercises in {count} different categories",
            "category": "cross_category", "rarity": rarity, "points": points, "badge_color": color,
            "requirement": {"type": "cross_category", "value": value, "window": "all_time"},
            "unlock_message": f"Exploring new territory! You've tried {count} exercise categories!",
            "share_message": f"Explored {count} exercise categories! {icon} {HASHTAG}",
        })

    for value, achievement_id, name, icon, rarity, points, color in SAME_DAY_TIERS:
        count = _count_phrase(value)
        entries.append({
            "id": achievement_id, "name": name, "icon": icon,
            "description": f"Complete exercises from {count} categories in one day",
            "category": "cross_category", "rarity": rarity, "points": points, "badge_color": color,
            "requirement": {"type": "cross_category", "value": value, "window": "same_day"},
            "unlock_message": f"{name}! {count} categories conquered in one day!",
            "share_message": f"{count} exercise categories in one day! {icon} {HASHTAG}",
        })

    for value, achievement_id, name, icon, rarity, points, color in SAME_WEEK_TIERS:
        count = _count_phrase(value)
        entries.append({
            "id": achievement_id, "name": name, "icon": icon,
            "description": f"Complete exercises from {count} categories in one week",
            "category": "cross_category", "rarity": rarity, "points": points, "badge_color": color,
            "requirement": {"type": "cross_category", "value": value, "window": "same_week"},
            "unlock_message": f"{name}! {count} categories in a single week!",
            "share_message": f"{count} exercise categories this week! {icon} {HASHTAG}",
        })

    for achievement_id, name, categories, icon, rarity, points, color in COMBINATIONS:
        labels = " and ".join(EXERCISE_CATEGORY_STYLES[c][0].lower() for c in categories)
        entries.append({
            "id": achievement_id, "name": name, "icon": icon,
            "description": f"Complete {labels} exercises in the same week",
            "category": "cross_category", "rarity": rarity, "points": points, "badge_color": color,
            "requirement": {
                "type": "cross_category",
                "value": len(categories),
                "window": "same_week",
                "combination": [c.value for c in categories],
            },
            "unlock_message": f"{name} unlocked! You paired {labels} in one week!",
            "share_message": f"Combined {labels} in one week! {icon} {HASHTAG}",
        })

    return entries


# =============================================================================
# Seasonal achievements (earnable only while their months are open)
# =============================================================================

SEASONAL_ACHIEVEMENTS: List[Dict[str, Any]] = [
    {
        "id": "new_year_champion", "name": "New Year Champion", "icon": "🎊",
        "description": "Complete 15 workouts in January",
        "category": "seasonal", "rarity": "epic", "points": 300,
        "badge_color": "from-yellow-300 to-pink-500",
        "requirement": {"type": "seasonal", "value": 15},
        "availability": {"start_month": 1, "end_month": 1},
        "unlock_message": "You kept your resolution! Champion of new beginnings!",
        "share_message": f"15 January workouts done! Resolution kept! 🎊 {HASHTAG}",
    },
    {
        "id": "self_love_warrior", "name": "Self-Love Warrior", "icon": "💝",
        "description": "Work out 14 days in a row during February",
        "category": "seasonal", "rarity": "rare", "points": 200,
        "badge_color": "from-pink-400 to-red-500",
        "requirement": {"type": "seasonal", "value": 14, "metric": "streak_days"},
        "availability": {"start_month": 2, "end_month": 2},
        "unlock_message": "The greatest love is self-love! You are amazing!",
        "share_message": f"14 February days in a row! Self-love warrior! 💝 {HASHTAG}",
    },
    {
        "id": "spring_awakening", "name": "Spring Awakening", "icon": "🌸",
        "description": "Awaken your strength with 21 March workouts",
        "category": "seasonal", "rarity": "epic", "points": 350,
        "badge_color": "from-pink-300 to-green-400",
        "requirement": {"type": "seasonal", "value": 21},
        "availability": {"start_month": 3, "end_month": 3},
        "unlock_message": "Like spring flowers, your strength has blossomed!",
        "share_message": f"21 March workouts! Spring awakening complete! 🌸 {HASHTAG}",
    },
    {
        "id": "summer_body_ready", "name": "Summer Body Ready", "icon": "☀️",
        "description": "Complete 30 workouts between June and August",
        "category": "seasonal", "rarity": "legendary", "points": 500,
        "badge_color": "from-yellow-400 to-orange-500",
        "requirement": {"type": "seasonal", "value": 30},
        "availability": {"start_month": 6, "end_month": 8},
        "unlock_message": "You are absolutely summer body ready! Shine bright!",
        "share_message": f"30 summer workouts completed! ☀️ {HASHTAG}",
    },
    {
        "id": "spooky_strong", "name": "Spooky Strong", "icon": "🎃",
        "description": "Frighten weakness away with 31 October workouts",
        "category": "seasonal", "rarity": "epic", "points": 400,
        "badge_color": "from-orange-400 to-gray-800",
        "requirement": {"type": "seasonal", "value": 31},
        "availability": {"start_month": 10, "end_month": 10},
        "unlock_message": "BOO! You scared away all your excuses! Spooktacular!",
        "share_message": f"31 October workouts! Spooky strong! 🎃 {HASHTAG}",
    },
    {
        "id": "holiday_hero", "name": "Holiday Hero", "icon": "🎄",
        "description": "Stay strong through the holidays with 25 December workouts",
        "category": "seasonal", "rarity": "legendary", "points": 600,
        "badge_color": "from-green-500 to-red-500",
        "requirement": {"type": "seasonal", "value": 25},
        "availability": {"start_month": 12, "end_month": 12},
        "unlock_message": "You are the greatest gift to yourself! Holiday Hero!",
        "share_message": f"25 December workouts! Holiday hero! 🎄 {HASHTAG}",
    },
]


# =============================================================================
# Hidden achievements (not listed until unlocked)
# =============================================================================

HIDDEN_ACHIEVEMENTS: List[Dict[str, Any]] = [
    {
        "id": "midnight_oil", "name": "Midnight Oil", "icon": "🌙",
        "description": "Complete a workout after 10 PM",
        "category": "consistency", "rarity": "uncommon", "points": 75, "hidden": True,
        "badge_color": "from-indigo-500 to-gray-900",
        "requirement": {"type": "time_of_day", "value": 1, "window": "late_night"},
        "unlock_message": "The night is your domain! Some find their strength in darkness.",
        "share_message": f"Worked out when the world sleeps! 🌙 {HASHTAG}",
    },
    {
        "id": "early_riser", "name": "Early Riser", "icon": "🐓",
        "description": "Complete a workout before 6 AM",
        "category": "consistency", "rarity": "uncommon", "points": 75, "hidden": True,
        "badge_color": "from-orange-300 to-yellow-400",
        "requirement": {"type": "time_of_day", "value": 1, "window": "pre_dawn"},
        "unlock_message": "The early bird catches the gains! Your dedication knows no bounds.",
        "share_message": f"Early Riser unlocked! Dawn warrior activated! 🐓 {HASHTAG}",
    },
    {
        "id": "trailblazer", "name": "Trailblazer", "icon": "🧭",
        "description": "Try 15 different exercises",
        "category": "exploration", "rarity": "rare", "points": 200, "hidden": True,
        "badge_color": "from-teal-400 to-blue-600",
        "requirement": {"type": "variety", "value": 15},
        "unlock_message": "True explorer! You've ventured into uncharted fitness territory.",
        "share_message": f"15 different exercises tried! 🧭 {HASHTAG}",
    },
]


def default_achievement_entries() -> List[Dict[str, Any]]:
    """Every entry of the production catalog, as raw mappings"""
    return [
        *CONSISTENCY_ACHIEVEMENTS,
        *PERFORMANCE_ACHIEVEMENTS,
        *EXPLORATION_ACHIEVEMENTS,
        *MILESTONE_ACHIEVEMENTS,
        *generate_category_achievements(),
        *generate_cross_category_achievements(),
        *SEASONAL_ACHIEVEMENTS,
        *HIDDEN_ACHIEVEMENTS,
    ]
