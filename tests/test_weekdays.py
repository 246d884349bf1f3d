import pytest

from calendarkit.weekdays import WEEKDAYS, weekday_labels


def test_unknown_code_falls_back_to_english():
    assert weekday_labels('xx') == weekday_labels('en')
    assert weekday_labels('') == weekday_labels('en')
    assert weekday_labels(None) == weekday_labels('en')


def test_lookup_ignores_case_and_region():
    assert weekday_labels('RU') == ('Пн', 'Вт', 'Ср', 'Чт', 'Пт', 'Сб', 'Вс')
    assert weekday_labels('pt-BR') == weekday_labels('pt')
    assert weekday_labels('de_AT') == weekday_labels('de')


def test_every_table_has_seven_labels():
    for code, labels in WEEKDAYS.items():
        assert len(labels) == 7, code


def test_tables_start_on_monday():
    assert weekday_labels('tr')[0] == 'Pzt'
    assert weekday_labels('he')[-1] == 'ראשון'


def test_table_is_read_only():
    with pytest.raises(TypeError):
        WEEKDAYS['xx'] = ('1', '2', '3', '4', '5', '6', '7')
