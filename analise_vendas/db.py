from functools import lru_cache

from sqlalchemy import create_engine

from analise_vendas.config import get_database_url


@lru_cache(maxsize=None)
def get_engine():
    return create_engine(get_database_url(), future=True)
