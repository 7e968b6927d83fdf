"""Gateway - stateless HTTP API over the personalization engine"""

__version__ = "1.0.0"
