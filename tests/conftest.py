"""Shared test fixtures."""

import pytest

from squad_data.config import SquadDataConfig
from squad_data.snapshot import RawSources


PLAYERS_CSV = (
    'player_id,name,pos,active\n'
    'P1,Kim Minsu,FW,Y\n'
    ',No Id,DF,yes\n'
)

MATCHES_CSV = (
    'match_id,season,type,round,date,time,opponent,location,status,score_for,score_against\r\n'
    'M1,2025,,3,2025-09-03,20:00,"Rovers, FC",Main Field,DONE,2,1\r\n'
    'M2,2026,CUP,,2026-03-11,21:30,United,,,,\r\n'
)

STATS_CSV = (
    'match_id,player_id,attended,goals,assists,yc,rc,clean_sheet\n'
    'M1,P1,TRUE,2,,0,0,no\n'
    'M2,P1,1,,1,1,,y\n'
)


@pytest.fixture
def raw_sources() -> RawSources:
    """Raw CSV text for the three source tables."""
    return RawSources(players=PLAYERS_CSV, matches=MATCHES_CSV, player_stats=STATS_CSV)


@pytest.fixture
def sources_dir(tmp_path, raw_sources):
    """Directory holding one CSV file per source tab."""
    (tmp_path / 'players.csv').write_text(raw_sources.players, encoding='utf-8')
    (tmp_path / 'matches.csv').write_text(raw_sources.matches, encoding='utf-8', newline='')
    (tmp_path / 'player_stats.csv').write_text(raw_sources.player_stats, encoding='utf-8')
    return tmp_path


@pytest.fixture
def file_config(sources_dir, monkeypatch) -> SquadDataConfig:
    """Config reading the source tabs from ``sources_dir``."""
    monkeypatch.delenv('SHEET_ID', raising=False)
    config = SquadDataConfig(sheet_id='test-sheet')
    config.fetch.url_template = f'file://{sources_dir}/{{sheet_name}}.csv'
    return config
