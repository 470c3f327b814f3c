from schoolboard.models import Profile, User, UserRole


def test_create_user_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=[
        "create-user", "kepsek@sd.sch.id", "rahasia123",
        "--name", "Kepala Sekolah", "--level", "sd", "--role", "admin", "--role", "staff",
    ])

    assert result.exit_code == 0, result.output
    assert "created" in result.output
    with app.app_context():
        user = User.query.filter_by(email="kepsek@sd.sch.id").one()
        assert user.check_password("rahasia123")
        assert Profile.query.filter_by(id=user.id).one().school_level == "sd"
        assert sorted(r.role for r in UserRole.query.filter_by(user_id=user.id)) == ["admin", "staff"]


def test_create_user_twice_fails(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["create-user", "guru@sd.sch.id", "rahasia123"])

    result = runner.invoke(args=["create-user", "guru@sd.sch.id", "lainnya123"])

    assert result.exit_code != 0
    assert "already exists" in result.output


def test_login_and_logout(client, make_user):
    make_user("guru@smp.sch.id", level="smp", roles=("viewer",))

    response = client.post("/auth/login", data={"email": "guru@smp.sch.id", "password": "salah"})
    assert "Email atau kata sandi salah" in response.get_data(as_text=True)

    response = client.post("/auth/login", data={"email": "guru@smp.sch.id", "password": "rahasia123"})
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/about/")

    response = client.get("/auth/logout")
    assert response.status_code == 302
    assert "/auth/login" in response.headers["Location"]
