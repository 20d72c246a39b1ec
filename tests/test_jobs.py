from algokit.jobs import Job, job_sequence

JOBS = [
    Job(1, 2, 100),
    Job(2, 1, 19),
    Job(3, 2, 27),
    Job(4, 1, 25),
    Job(5, 3, 15),
]


def test_classic_example():
    assert [job.id for job in job_sequence(JOBS)] == [3, 1, 5]


def test_each_job_meets_its_deadline():
    result = job_sequence(JOBS)
    for slot, job in enumerate(result):
        assert slot < job.deadline


def test_no_job_scheduled_twice_and_all_from_input():
    result = job_sequence(JOBS)
    assert len({job.id for job in result}) == len(result)
    assert all(job in JOBS for job in result)


def test_empty():
    assert job_sequence([]) == []


def test_zero_deadline_is_never_scheduled():
    assert job_sequence([Job(7, 0, 50)]) == []


def test_all_jobs_fit_when_deadlines_are_loose():
    jobs = [Job(1, 5, 10), Job(2, 5, 20), Job(3, 5, 30)]
    result = job_sequence(jobs)
    assert sorted(job.id for job in result) == [1, 2, 3]