from .base import BaseSettings


class ReportSettings(BaseSettings):
    template_path: str = "boilerkpi/report/template"
    title: str = "BÁO CÁO ĐÁNH GIÁ HIỆU SUẤT"
    position: str = "Trưởng ca lò hơi"
    organization: str | None = None


class RubricSettings(BaseSettings):
    # relative to the project root; unset means the rubric bundled with the package
    path: str | None = None
