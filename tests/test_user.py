from battlecity.server.user import User


def test_new_user_starts_with_nothing():
    password = "password"
    user = User("alice", password=password)
    assert user.username == "alice"
    assert user.password == password
    assert user.total_score == 0
    assert user.special_money == 0


def test_str_lists_username_money_and_score():
    user = User(username="bob", special_money=7, total_score=3)
    assert str(user) == "bob 7 3"


def test_add_total_score_accumulates():
    user = User("carol")
    user.add_total_score(10)
    user.add_total_score(5)
    assert user.total_score == 15


def test_add_special_money_accumulates():
    user = User("dave")
    user.add_special_money(100)
    user.add_special_money(20)
    assert user.special_money == 120


def test_total_score_wraps_at_eight_bits():
    user = User("erin", total_score=17)
    user.add_total_score(256)
    assert user.total_score == 17
    user.add_total_score(1000)
    assert 0 <= user.total_score <= 255


def test_special_money_wraps_at_sixteen_bits():
    user = User("frank", special_money=40)
    user.add_special_money(65536)
    assert user.special_money == 40


def test_equal_records_compare_equal():
    user = User("gina", id=1, weapon_id=2)
    assert (user.username, user.id, user.weapon_id) == ("gina", 1, 2)
    assert user == User("gina", id=1, weapon_id=2)
    assert not user == User("gina", id=1, weapon_id=3)