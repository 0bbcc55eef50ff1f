import os
from dotenv import load_dotenv

from repositories import InMemoryExpenseRepository, InMemorySpendingLimitRepository

load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    # JSON API only, there are no browser forms to protect
    WTF_CSRF_ENABLED = False

    @staticmethod
    def init_stores(app):
        app.expense_repository = InMemoryExpenseRepository()
        app.spending_limit_repository = InMemorySpendingLimitRepository()
