import enum


class DeploymentEnvironment(enum.Enum):
    Production = "production"
    Development = "development"
    Test = "test"
    Local = "local"


class RatingLevel(enum.Enum):
    Good = "GOOD"
    Average = "AVERAGE"
    Weak = "WEAK"


class Ranking(enum.Enum):
    Unranked = "---"
    Excellent = "Xuất Sắc"
    Satisfactory = "Đạt Yêu Cầu"
    Unsatisfactory = "Không Đạt"


class Theme(enum.Enum):
    Dark = "dark"
    Light = "light"
