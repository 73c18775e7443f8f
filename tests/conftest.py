"""
Pytest configuration and shared fixtures for tests
"""

import os

import pytest

from clinic_registry import config as config_module
from clinic_registry.config import RegistryConfig
from clinic_registry.entities import Service, UserAccount
from clinic_registry.services_manager import ServiceManager
from clinic_registry.user_registry import UserRegistry

SERVICE_SEED = [
    {"id": 1, "name": "Кардіо Check", "doctor": "Анна Горова", "usersMonth1": 120, "usersMonth2": 150, "cost": 1800, "durationMinutes": 50},
    {"id": 2, "name": "Психо Detox", "doctor": "Ігор Литвин", "usersMonth1": 95, "usersMonth2": 80, "cost": 1400, "durationMinutes": 60},
    {"id": 3, "name": "Нутрі Контроль", "doctor": "Оля Стасюк", "usersMonth1": 210, "usersMonth2": 215, "cost": 1600, "durationMinutes": 45},
    {"id": 4, "name": "Сонний Ритм", "doctor": "Максим Чалий", "usersMonth1": 180, "usersMonth2": 170, "cost": 1600, "durationMinutes": 35},
    {"id": 5, "name": "Розбір аналізів", "doctor": "Діана Гумена", "usersMonth1": 250, "usersMonth2": 300, "cost": 2200, "durationMinutes": 55},
    {"id": 6, "name": "Сімейна розмова", "doctor": "Кирило Вій", "usersMonth1": 60, "usersMonth2": 62, "cost": 1100, "durationMinutes": 70},
    {"id": 7, "name": "Mindfulness", "doctor": "Ірина Сойко", "usersMonth1": 310, "usersMonth2": 350, "cost": 2600, "durationMinutes": 40},
    {"id": 8, "name": "Кар'єрний баланс", "doctor": "Марта Шумило", "usersMonth1": 90, "usersMonth2": 130, "cost": 1500, "durationMinutes": 65},
    {"id": 9, "name": "Мобільний check-up", "doctor": "Роман Войтко", "usersMonth1": 400, "usersMonth2": 398, "cost": 2800, "durationMinutes": 30},
    {"id": 10, "name": "Дитячий супровід", "doctor": "Катерина Гринь", "usersMonth1": 75, "usersMonth2": 90, "cost": 1350, "durationMinutes": 80},
]

USER_SEED = [
    {"lastName": "Коваль", "firstName": "Олена", "age": 28, "education": "MA", "feedbackGoal": "Співпраця", "requestDate": "2025-01-12", "requestTime": "09:15"},
    {"lastName": "Гуменюк", "firstName": "Артем", "age": 35, "education": "BA", "feedbackGoal": "Технічне питання", "requestDate": "2025-02-04", "requestTime": "21:40"},
    {"lastName": "Лисенко", "firstName": "Наталія", "age": 31, "education": "MBA", "feedbackGoal": "Запис на консультацію", "requestDate": "2025-01-21", "requestTime": "17:00"},
    {"lastName": "Савчук", "firstName": "Ілля", "age": 22, "education": "BSc", "feedbackGoal": "Знижка", "requestDate": "2025-01-21", "requestTime": "07:45"},
    {"lastName": "Данилюк", "firstName": "Марія", "age": 44, "education": "PhD", "feedbackGoal": "Співпраця", "requestDate": "2025-03-05", "requestTime": "10:30"},
    {"lastName": "Синюк", "firstName": "Ганна", "age": 19, "education": "College", "feedbackGoal": "Зворотній зв'язок", "requestDate": "2025-02-10", "requestTime": "12:00"},
    {"lastName": "Гнатюк", "firstName": "Руслан", "age": 52, "education": "MD", "feedbackGoal": "Сервіс", "requestDate": "2025-01-31", "requestTime": "16:50"},
    {"lastName": "Мельник", "firstName": "Ірина", "age": 27, "education": "BA", "feedbackGoal": "Питання по оплаті", "requestDate": "2025-01-20", "requestTime": "23:10"},
    {"lastName": "Петренко", "firstName": "Олег", "age": 33, "education": "MA", "feedbackGoal": "Співпраця", "requestDate": "2025-01-12", "requestTime": "09:15"},
    {"lastName": "Іващенко", "firstName": "Лілія", "age": 29, "education": "BSc", "feedbackGoal": "Відгук", "requestDate": "2025-04-01", "requestTime": "14:05"},
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Drop the config singleton and any CLINIC_* variables between tests"""
    for name in list(os.environ):
        if name.upper().startswith("CLINIC_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture(name="config")
def config_fixture():
    """Default configuration, ignoring any .env file"""
    return RegistryConfig(_env_file=None)


@pytest.fixture(name="seed_services")
def seed_services_fixture():
    return [Service.from_raw(raw) for raw in SERVICE_SEED]


@pytest.fixture(name="seed_users")
def seed_users_fixture():
    return [UserAccount.from_raw(raw) for raw in USER_SEED]


@pytest.fixture(name="service_manager")
def service_manager_fixture(seed_services, config):
    return ServiceManager(seed_services, config=config)


@pytest.fixture(name="user_registry")
def user_registry_fixture(seed_users, config):
    return UserRegistry(seed_users, config=config)
