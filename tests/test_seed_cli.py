import sqlalchemy

from scripts.seed_db import main
from votehub.database import make_engine


def test_seed_cli_seeds_and_can_run_again(tmp_path, capsys):
    url = f"sqlite:///{(tmp_path / 'cli.db').as_posix()}"

    assert main(url) == 0
    assert main(url) == 0
    assert "Database seeded successfully" in capsys.readouterr().out

    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            assert conn.execute(sqlalchemy.text("SELECT COUNT(*) FROM revenue")).scalar() == 12
            assert conn.execute(sqlalchemy.text("SELECT COUNT(*) FROM shareholders")).scalar() == 3
    finally:
        engine.dispose()
