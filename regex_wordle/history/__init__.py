from .fetcher import (fetch_solution, fetch_all, fetch_past_answers_page,
                      write_history_csv, write_history_json, FIRST_PUZZLE)

__all__ = ["fetch_solution", "fetch_all", "fetch_past_answers_page",
           "write_history_csv", "write_history_json", "FIRST_PUZZLE"]
