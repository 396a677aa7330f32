def write_db(mocker, *, fail_with: Exception | None = None):
    db = mocker.Mock()
    db.execute = mocker.AsyncMock(side_effect=fail_with)
    db.commit = mocker.AsyncMock()
    db.rollback = mocker.AsyncMock()
    db.scalar = mocker.AsyncMock(return_value=False)
    return db


def db_with_scalars_first(mocker, value):
    res = mocker.Mock()
    res.scalars.return_value.first.return_value = value
    db = mocker.Mock()
    db.execute = mocker.AsyncMock(return_value=res)
    return db, res


def executed_params(db) -> dict:
    stmt = db.execute.await_args.args[0]
    return stmt.compile().params


def executed_sql(db) -> str:
    return str(db.execute.await_args.args[0].compile())
