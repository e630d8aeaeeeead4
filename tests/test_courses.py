import logging

from registrar.schemas import Course


def test_insert_and_get_round_trip(courses) -> None:
    assert courses.insert_course("CS101", "Intro to CS", 30) is True

    course = courses.get_course("cs101")
    assert course.course_code == "cs101"
    assert course.name == "Intro to CS"
    assert course.max_capacity == 30
    assert course.enrolled == 0
    assert course.is_deleted is False
    assert courses.get_course("Cs101") == course


def test_duplicate_code_is_rejected_and_row_untouched(courses) -> None:
    assert courses.insert_course("cs101", "Intro", 30) is True
    assert courses.insert_course("CS101", "Other", 5) is False

    course = courses.get_course("cs101")
    assert course.name == "Intro"
    assert course.max_capacity == 30


def test_non_positive_capacity_is_rejected(courses, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="registrar")
    assert courses.insert_course("cs101", "Intro", 0) is False
    assert "Rejected course" in caplog.text
    assert courses.get_course("cs101") is None


def test_get_courses_filters_on_deleted_and_orders_by_code(courses) -> None:
    for code in ("ma201", "cs101", "ph150"):
        courses.insert_course(code, code.upper(), 10)
    assert [c.course_code for c in courses.get_courses(False)] == ["cs101", "ma201", "ph150"]

    courses.delete_restore_course(courses.get_course("ma201"), True)
    assert [c.course_code for c in courses.get_courses(False)] == ["cs101", "ph150"]
    assert [c.course_code for c in courses.get_courses(True)] == ["ma201"]

    courses.delete_restore_course(courses.get_course("ma201"), False)
    assert courses.get_courses(True) == []


def test_delete_of_unknown_course_is_a_logged_noop(courses, caplog) -> None:
    caplog.set_level(logging.INFO, logger="registrar")
    courses.delete_restore_course(Course(course_code="ghost", name="Nothing", max_capacity=1), True)
    assert "does not exist" in caplog.text


def test_update_name_trims(courses) -> None:
    courses.insert_course("cs101", "Intro", 10)
    assert courses.update_course_name("CS101", "  Intro to CS ") is True
    assert courses.get_course("cs101").name == "Intro to CS"
    assert courses.update_course_name("ghost", "Nothing") is False


def test_update_max_capacity(courses) -> None:
    courses.insert_course("cs101", "Intro", 10)
    assert courses.update_course_max_capacity("CS101", 25) is True
    assert courses.get_course("cs101").max_capacity == 25
    assert courses.update_course_max_capacity("ghost", 25) is False
    assert courses.update_course_max_capacity("cs101", 0) is False
    assert courses.get_course("cs101").max_capacity == 25


def test_capacity_may_shrink_below_enrollment(manager) -> None:
    manager.insert_course("cs101", "Intro", 3)
    for sid in ("s1", "s2"):
        manager.insert_student(sid, sid)
        assert manager.enroll_student_in_course(sid, "cs101")

    assert manager.update_course_max_capacity("cs101", 1) is True
    course = manager.get_course("cs101")
    assert course.enrolled == 2
    assert course.remaining_slots == -1

    manager.insert_student("s3", "Cy")
    assert manager.enroll_student_in_course("s3", "cs101") is False
    assert manager.get_course("cs101").enrolled == 2


def test_soft_delete_keeps_enrollment_rows(manager, count_enrollments) -> None:
    manager.insert_course("cs101", "Intro", 5)
    manager.insert_student("s1", "Ann")
    assert manager.enroll_student_in_course("s1", "cs101")

    manager.delete_restore_course(manager.get_course("cs101"), True)

    assert "cs101" not in [c.course_code for c in manager.get_courses(False)]
    assert "cs101" in [c.course_code for c in manager.get_courses(True)]
    assert count_enrollments("cs101") == 1
    assert [c.course_code for c in manager.get_student("s1").enrolled_courses] == ["cs101"]


def test_unavailable_store_collapses_to_failure_values(offline_manager) -> None:
    repo = offline_manager.courses
    assert repo.insert_course("cs101", "Intro", 3) is False
    assert repo.get_course("cs101") is None
    assert repo.get_courses(True) is None
    assert repo.update_course_name("cs101", "Intro") is False
    assert repo.update_course_max_capacity("cs101", 4) is False
    repo.delete_restore_course(Course(course_code="cs101", name="Intro", max_capacity=3), False)
