from datetime import date

from avlkit.person import PersonID, Student, Teacher, by_person_id
from avlkit.tree import AVLTree

DOB = date(2000, 1, 1)


def _student(series, number, first="Ivan", middle="Ivanovich", last="Ivanov"):
    return Student(PersonID(series, number), first, middle, last, DOB)


def test_full_name():
    student = _student(1000, 123456)
    assert student.full_name() == "Ivan Ivanovich Ivanov"


def test_person_id_equality():
    assert PersonID(1000, 123456) == PersonID(1000, 123456)
    assert PersonID(1000, 123456) != PersonID(1000, 654321)


def test_by_person_id_orders_series_first():
    low_series = _student(1000, 654321)
    high_series = _student(1001, 123456)
    assert by_person_id(low_series, high_series)
    assert not by_person_id(high_series, low_series)


def test_by_person_id_orders_number_within_series():
    a = _student(1000, 1)
    b = _student(1000, 2)
    assert by_person_id(a, b)
    assert not by_person_id(b, a)
    assert not by_person_id(a, a)


def test_student_tree():
    s1 = _student(1000, 123456)
    s2 = _student(1001, 654321, "Petr", "Petrovich", "Petrov")
    tree = AVLTree(by_person_id)
    tree.insert(s1)
    tree.insert(s2)
    assert tree.contains(s1)
    assert [p.full_name() for p in tree] == [s1.full_name(), s2.full_name()]


def test_teacher_tree():
    teacher = Teacher(PersonID(2000, 111111), "Maria", "Ivanovna", "Sidorova", DOB)
    tree = AVLTree(by_person_id)
    tree.insert(teacher)
    assert tree.contains(teacher)
    other = Teacher(PersonID(2000, 222222), "Maria", "Ivanovna", "Sidorova", DOB)
    assert not tree.contains(other)


def test_same_id_counts_as_duplicate():
    tree = AVLTree(by_person_id)
    tree.insert(_student(1, 1, "A", "B", "C"))
    tree.insert(_student(1, 1, "X", "Y", "Z"))
    assert [p.first_name for p in tree] == ["A"]