"""Interface-level constants for the todo CLI/TUI."""

from typing import Dict

from core import DEFAULT_THRESHOLD

DRAG_THRESHOLD = DEFAULT_THRESHOLD

LANG_PACK: Dict[str, Dict[str, str]] = {
    "en": {
        "LOGO": "T O D O",
        "THEME_TO_DARK": "☾ dark",
        "THEME_TO_LIGHT": "☀ light",
        "INPUT_PLACEHOLDER": "Create a new todo...",
        "SEARCH_PLACEHOLDER": "Search todos...",
        "FILTER_ALL": "All",
        "FILTER_ACTIVE": "Active",
        "FILTER_COMPLETED": "Completed",
        "ITEMS_LEFT": "{count} items left",
        "CLEAR_COMPLETED": "Clear Completed",
        "DRAG_HINT": "Drag and drop to reorder list",
        "EMPTY_SEARCH_TITLE": "No todos found",
        "EMPTY_SEARCH_SUBTITLE": "Try a different search term",
        "EMPTY_COMPLETED_TITLE": "No completed todos",
        "EMPTY_ACTIVE_TITLE": "No active todos",
        "EMPTY_ALL_TITLE": "No todos yet",
        "EMPTY_SUBTITLE": "Create your first todo to get started",
        "KEYS_HINT": "tab focus · space toggle · x delete · J/K move · 1/2/3 filter · c clear · ^T theme · ^Q quit",
        "STATUS_ADDED": "Added: {text}",
        "STATUS_CLEARED": "Removed {count} completed",
        "STATUS_MOVED": "Moved: {text}",
        "ERR_STORE": "Storage error: {error}",
        "ERR_NOT_FOUND": "Todo not found: {id}",
        "ERR_OUT_OF_RANGE": "Position out of range",
        "ERR_EMPTY_INPUT": "Nothing to add",
    },
    "ru": {
        "LOGO": "З А Д А Ч И",
        "THEME_TO_DARK": "☾ тёмная",
        "THEME_TO_LIGHT": "☀ светлая",
        "INPUT_PLACEHOLDER": "Новая задача...",
        "SEARCH_PLACEHOLDER": "Поиск задач...",
        "FILTER_ALL": "Все",
        "FILTER_ACTIVE": "Активные",
        "FILTER_COMPLETED": "Выполненные",
        "ITEMS_LEFT": "Осталось: {count}",
        "CLEAR_COMPLETED": "Очистить выполненные",
        "DRAG_HINT": "Перетащите строку, чтобы изменить порядок",
        "EMPTY_SEARCH_TITLE": "Ничего не найдено",
        "EMPTY_SEARCH_SUBTITLE": "Попробуйте другой запрос",
        "EMPTY_COMPLETED_TITLE": "Нет выполненных задач",
        "EMPTY_ACTIVE_TITLE": "Нет активных задач",
        "EMPTY_ALL_TITLE": "Задач пока нет",
        "EMPTY_SUBTITLE": "Создайте первую задачу",
        "STATUS_ADDED": "Добавлено: {text}",
        "STATUS_CLEARED": "Удалено выполненных: {count}",
        "STATUS_MOVED": "Перемещено: {text}",
        "ERR_STORE": "Ошибка хранилища: {error}",
        "ERR_NOT_FOUND": "Задача не найдена: {id}",
        "ERR_OUT_OF_RANGE": "Позиция вне списка",
        "ERR_EMPTY_INPUT": "Нечего добавлять",
    },
}
