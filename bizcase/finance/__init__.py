# bizcase/finance/__init__.py
from .cashflow import project
from .metrics import irr, npv, payback_period, roi, run_metrics

__all__ = ["project", "roi", "npv", "payback_period", "irr", "run_metrics"]
