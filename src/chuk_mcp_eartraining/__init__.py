"""
CHUK Ear Training - equal-temperament synthesis and interval quizzes.
"""
