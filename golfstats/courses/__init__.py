from .stats import CourseRoundRef, CourseStats, HoleStats, compute_course_stats

__all__ = ["CourseRoundRef", "CourseStats", "HoleStats", "compute_course_stats"]
