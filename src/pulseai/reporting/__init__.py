from .report import classify, render_report, assign_pin_roles

__all__ = ["classify", "render_report", "assign_pin_roles"]
