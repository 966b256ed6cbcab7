"""Transfer routes — CSV export and wholesale CSV import over HTTP.

Invariants:
    - Export is text/csv with a dated attachment name, header first, list order
    - Export of an empty list is refused with NOTHING_TO_EXPORT
    - Import replaces the list in file order; zero records is INVALID_FORMAT
      and leaves existing data alone
    - Non-UTF-8 uploads are UNREADABLE_FILE
"""

from sqlalchemy import func, select

from wordbank.models.word import Word

_CSV = {"Content-Type": "text/csv"}


async def _words(client):
    res = await client.get("/api/v1/words")
    return [(w["word"], w["definition"]) for w in res.json()["words"]]


async def test_export_empty_list_is_refused(client):
    res = await client.get("/api/v1/words/export")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "NOTHING_TO_EXPORT"


async def test_export_returns_csv_attachment(client, seed_words):
    res = await client.get("/api/v1/words/export")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    disposition = res.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="my_words_')
    assert disposition.endswith('.csv"')
    assert res.text == (
        "word,definition\n"
        "cat,a small feline\n"
        "dog,a loyal canine\n"
        'owl,"a bird that says ""hoo"", mostly at night"'
    )


async def test_import_replaces_list_in_file_order(client, seed_words):
    blob = "word,definition\nzebra,striped\n\"a,b\",\"he said \"\"hi\"\"\"\n"
    res = await client.post("/api/v1/words/import", content=blob, headers=_CSV)
    assert res.status_code == 200
    assert res.json() == {"imported": 2, "replaced": 3}
    assert await _words(client) == [("zebra", "striped"), ("a,b", 'he said "hi"')]


async def test_import_without_header_and_with_crlf(client):
    blob = "cat,a small feline\r\n\r\ndog,a loyal canine\r\n"
    res = await client.post("/api/v1/words/import", content=blob, headers=_CSV)
    assert res.json()["imported"] == 2
    assert await _words(client) == [
        ("cat", "a small feline"), ("dog", "a loyal canine"),
    ]


async def test_import_missing_definition_becomes_empty(client):
    res = await client.post("/api/v1/words/import", content="lonely", headers=_CSV)
    assert res.status_code == 200
    assert await _words(client) == [("lonely", "")]


async def test_header_only_import_is_invalid_and_keeps_data(client, seed_words, test_db):
    res = await client.post(
        "/api/v1/words/import", content="word,definition\n", headers=_CSV,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_FORMAT"

    count = await test_db.execute(select(func.count()).select_from(Word))
    assert count.scalar_one() == 3


async def test_empty_body_import_is_invalid(client):
    res = await client.post("/api/v1/words/import", content=b"", headers=_CSV)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_FORMAT"


async def test_non_utf8_import_is_unreadable(client, seed_words):
    res = await client.post(
        "/api/v1/words/import", content=b"\xff\xfe\x00bad", headers=_CSV,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNREADABLE_FILE"
    assert len(await _words(client)) == 3


async def test_import_tolerates_utf8_bom(client):
    blob = b"\xef\xbb\xbf" + "word,definition\ncafé,coffee place".encode("utf-8")
    res = await client.post("/api/v1/words/import", content=blob, headers=_CSV)
    assert res.json()["imported"] == 1
    assert await _words(client) == [("café", "coffee place")]


async def test_imported_rows_get_fresh_ids(client, seed_words):
    old_ids = {str(w.id) for w in seed_words}
    await client.post("/api/v1/words/import", content="cat,feline", headers=_CSV)
    res = await client.get("/api/v1/words")
    (word,) = res.json()["words"]
    assert word["id"] not in old_ids


async def test_export_then_import_restores_the_same_list(client, seed_words):
    await client.post(
        "/api/v1/words",
        json={"word": "poem", "definition": "line one\nline two, with \"quotes\""},
    )
    before = await _words(client)

    exported = await client.get("/api/v1/words/export")
    res = await client.post(
        "/api/v1/words/import", content=exported.content, headers=_CSV,
    )
    assert res.json() == {"imported": 4, "replaced": 4}
    assert await _words(client) == before


async def test_stray_quote_does_not_merge_following_lines(client, seed_words):
    blob = (
        "word,definition\n"
        '5" nail,a short nail\n'
        "cat,a small feline\n"
        "dog,a loyal canine"
    )
    res = await client.post("/api/v1/words/import", content=blob, headers=_CSV)
    assert res.json() == {"imported": 3, "replaced": 3}
    assert await _words(client) == [
        ("5 nail,a short nail", ""),
        ("cat", "a small feline"),
        ("dog", "a loyal canine"),
    ]
