# printqueue

printqueue is a small print-queue system that runs in a terminal. It keeps a
register of users and holds their print requests in a priority queue. It
records every job it prints in a history, and it reports statistics for each
type of user. The menu and its messages are in Portuguese.

## Priorities

Every user has a `UserType` (from `printqueue.users`):

| Value | Member                                    | Priority |
|-------|-------------------------------------------|----------|
| 1     | `UserType.STUDENT`                        | lowest   |
| 2     | `UserType.TEACHER`                        | middle   |
| 3     | `UserType.ADMINISTRATION` (alias `DIRECTION`) | highest  |

A job from a higher-priority user goes ahead of every job from a
lower-priority user. Jobs from users of the same type keep the order in which
they arrived.

## Installation

```
pip install .
```

## Interactive use

```
printqueue
```

This reads commands from standard input, one value per line, and shows a
numbered menu:

1. Register a user (name, CPF, type 1–3)
2. Submit a print request (user's CPF, number of pages)
3. Print the next job in the queue
4. Show the waiting queue
5. Show the print history (most recent first)
6. Show statistics
7. Quit

The program also stops when its input ends. An unknown option, a type outside
1–3, or a CPF that is not registered is reported and the menu is shown again.

The statistics give three figures for each user type:

- the number of jobs printed
- the total number of pages
- the average estimated time per job, assuming 5 seconds per page
  (`N/A` when that type has printed nothing)

## Library use

```python
from printqueue.users import UserRegistry, UserType
from printqueue.print_queue import PrintQueue
from printqueue.history import PrintHistory
from printqueue.printing import create_job, submit_job, perform_print
from printqueue.stats import compute_statistics, format_statistics

users = UserRegistry()
users.add("Ana", 1001, UserType.STUDENT)
users.add("Carlos", 2002, UserType.TEACHER)

queue = PrintQueue()
history = PrintHistory()

submit_job(create_job(users.find_by_cpf(1001), 3), queue)
submit_job(create_job(users.find_by_cpf(2002), 10), queue)

job = perform_print(history, queue)   # Carlos's job comes out first
print(job.user.name, job.pages)
print(format_statistics(compute_statistics(history)))
```

Some points of behaviour:

- `UserRegistry.add` raises `ValueError` for an unknown user type;
  `UserRegistry.remove` raises `KeyError` for a user that is not registered.
  `find_by_name` and `find_by_cpf` return the most recently added match, or
  `None`.
- `PrintQueue.dequeue` raises `IndexError` when the queue is empty;
  `PrintQueue.peek` and `PrintQueue.find` return `None` instead.
- `PrintHistory.pop` and `PrintHistory.peek` raise `IndexError` when the
  history is empty; iterating a history yields the most recent job first.
- `perform_print` raises `EmptyQueueError` (a subclass of `IndexError`) when
  there is nothing to print; `take_from_history` returns `None` when the
  history is empty.
- `PrintJob.estimated_seconds()` gives the pages times 5 seconds, or times the
  rate you pass.
- `PrintSystem` in `printqueue.cli` runs the menu over any iterable of lines
  and writes to the text stream it is given, which makes it easy to script.

## What it does not do

printqueue does not send anything to a real printer; "printing" moves a job
from the queue to the history. It keeps everything in memory: users, queue
and history are lost when the program ends.

## Running the tests

```
pip install .[test]
pytest
```