from respire_app.extensions import db
from respire_app.modules.gamification.models import Badge
from respire_app.modules.goals.models import GoalTemplate


def seed_badges():
    """Insert the default badge catalog. Existing codes are left alone."""
    badges_data = [
        # --- MILESTONE BADGES ---
        {
            "code": "first_day",
            "name": "First Step",
            "description": "Log your first day in the tracker",
            "icon": "🌱",
            "category": "milestone",
            "points": 10
        },
        {
            "code": "week_streak",
            "name": "One Week Strong",
            "description": "Track 7 consecutive days",
            "icon": "🔥",
            "category": "milestone",
            "points": 50
        },
        {
            "code": "month_streak",
            "name": "Monthly Momentum",
            "description": "Track 30 consecutive days",
            "icon": "🌙",
            "category": "milestone",
            "points": 200
        },
        {
            "code": "hundred_days",
            "name": "Centurion",
            "description": "Track 100 consecutive days",
            "icon": "💯",
            "category": "milestone",
            "points": 500
        },
        {
            "code": "year_streak",
            "name": "A Year of Breathing",
            "description": "Track 365 consecutive days",
            "icon": "👑",
            "category": "milestone",
            "points": 1500
        },

        # --- REDUCTION BADGES ---
        {
            "code": "zero_day",
            "name": "Clean Day",
            "description": "Spend a whole day without smoking or vaping",
            "icon": "✨",
            "category": "reduction",
            "points": 25
        },
        {
            "code": "ten_zero_days",
            "name": "Ten Clean Days",
            "description": "Reach 10 days without smoking or vaping",
            "icon": "🌟",
            "category": "reduction",
            "points": 150
        },
        {
            "code": "half_reduction",
            "name": "Halfway There",
            "description": "Average half your baseline cigarettes over your last 7 entries",
            "icon": "📉",
            "category": "reduction",
            "points": 100
        },

        # --- POSITIVE ACTION BADGES ---
        {
            "code": "first_sport",
            "name": "On the Move",
            "description": "Log your first physical activity",
            "icon": "🏃",
            "category": "positive",
            "points": 10
        },
        {
            "code": "hundred_min_sport",
            "name": "Active Lungs",
            "description": "Reach 100 minutes of physical activity",
            "icon": "💪",
            "category": "positive",
            "points": 50
        },
        {
            "code": "first_meditation",
            "name": "Deep Breath",
            "description": "Log your first meditation session",
            "icon": "🧘",
            "category": "positive",
            "points": 10
        },
        {
            "code": "hundred_min_meditation",
            "name": "Inner Calm",
            "description": "Reach 100 minutes of meditation",
            "icon": "🕊️",
            "category": "positive",
            "points": 50
        },
        {
            "code": "first_journal",
            "name": "Dear Diary",
            "description": "Write your first journal entry",
            "icon": "📓",
            "category": "positive",
            "points": 10
        },
        {
            "code": "ten_journals",
            "name": "Storyteller",
            "description": "Write 10 journal entries",
            "icon": "📚",
            "category": "positive",
            "points": 50
        },

        # --- REGULARITY BADGES ---
        {
            "code": "tracker_week",
            "name": "Regular Tracker",
            "description": "Log every day for the last 7 days",
            "icon": "📅",
            "category": "regularity",
            "points": 30
        },
        {
            "code": "tracker_month",
            "name": "Tracking Habit",
            "description": "Log every day for the last 30 days",
            "icon": "🗓️",
            "category": "regularity",
            "points": 150
        },
    ]

    existing_codes = {code for (code,) in db.session.query(Badge.code).all()}

    added_count = 0
    for data in badges_data:
        if data['code'] in existing_codes:
            continue
        db.session.add(Badge(**data))
        added_count += 1

    if added_count > 0:
        db.session.commit()

    return added_count


def seed_goal_templates():
    """Insert the default daily goal templates. Existing codes are left alone."""
    templates_data = [
        # --- REDUCTION ---
        {
            "code": "max_5_cigarettes",
            "title": "No more than 5 cigarettes",
            "description": "Smoke at most 5 cigarettes today",
            "category": "reduction",
            "target_type": "cigarettes",
            "difficulty": "easy",
            "max_cigarettes": 5,
            "points_reward": 10
        },
        {
            "code": "max_2_cigarettes",
            "title": "No more than 2 cigarettes",
            "description": "Smoke at most 2 cigarettes today",
            "category": "reduction",
            "target_type": "cigarettes",
            "difficulty": "medium",
            "max_cigarettes": 2,
            "points_reward": 20
        },
        {
            "code": "zero_cigarettes",
            "title": "Smoke-free day",
            "description": "Do not smoke a single cigarette today",
            "category": "reduction",
            "target_type": "cigarettes",
            "difficulty": "hard",
            "max_cigarettes": 0,
            "points_reward": 40
        },
        {
            "code": "max_100_puffs",
            "title": "No more than 100 puffs",
            "description": "Keep vaping under 100 puffs today",
            "category": "reduction",
            "target_type": "vape",
            "difficulty": "easy",
            "max_vape_puffs": 100,
            "points_reward": 10
        },
        {
            "code": "max_30_puffs",
            "title": "No more than 30 puffs",
            "description": "Keep vaping under 30 puffs today",
            "category": "reduction",
            "target_type": "vape",
            "difficulty": "medium",
            "max_vape_puffs": 30,
            "points_reward": 20
        },
        {
            "code": "low_both",
            "title": "Light day on both",
            "description": "At most 5 cigarettes and 50 puffs today",
            "category": "reduction",
            "target_type": "both",
            "difficulty": "medium",
            "max_cigarettes": 5,
            "max_vape_puffs": 50,
            "points_reward": 25
        },

        # --- TIME / PERIOD / SPACING / CONTEXT ---
        {
            "code": "no_morning",
            "title": "Nicotine-free morning",
            "description": "Wait until noon before the first cigarette or puff",
            "category": "time",
            "target_type": "both",
            "difficulty": "medium",
            "points_reward": 15
        },
        {
            "code": "smoke_free_evening",
            "title": "Smoke-free evening",
            "description": "Nothing after 8 pm",
            "category": "period",
            "target_type": "both",
            "difficulty": "medium",
            "points_reward": 15
        },
        {
            "code": "two_hour_spacing",
            "title": "Two hours apart",
            "description": "Leave at least two hours between each cigarette or session",
            "category": "spacing",
            "target_type": "both",
            "difficulty": "hard",
            "points_reward": 20
        },
        {
            "code": "no_coffee_pairing",
            "title": "Coffee without smoke",
            "description": "No cigarette or vape with your coffee",
            "category": "context",
            "target_type": "both",
            "difficulty": "easy",
            "points_reward": 10
        },
    ]

    existing_codes = {code for (code,) in db.session.query(GoalTemplate.code).all()}

    added_count = 0
    for data in templates_data:
        if data['code'] in existing_codes:
            continue
        db.session.add(GoalTemplate(**data))
        added_count += 1

    if added_count > 0:
        db.session.commit()

    return added_count


def seed_catalog():
    return {
        'badges': seed_badges(),
        'goal_templates': seed_goal_templates(),
    }
