"""
Where the calculator keeps variables while a program runs.

There are two policies, one per dialect, and they disagree on purpose about mixed-case programs:
	ExactScope treats "a" and "A" as two variables.
	FoldedScope treats them as one, and remembers whichever spelling created it.
"""
from abc import ABC, abstractmethod
from typing import Iterator, Union

NUMBER = Union[int, float]

class Absent(KeyError): pass

class Scope(ABC):
	@abstractmethod
	def lookup(self, name: str) -> NUMBER:
		""" Raise Absent if there's no such variable. """

	@abstractmethod
	def assign(self, name: str, value: NUMBER) -> NUMBER: pass

	@abstractmethod
	def items(self) -> Iterator[tuple[str, NUMBER]]: pass

	def __contains__(self, name: str) -> bool:
		try: self.lookup(name)
		except Absent: return False
		else: return True

	def __len__(self): return sum(1 for _ in self.items())

	def snapshot(self) -> dict[str, NUMBER]:
		""" A plain dictionary of the current contents, in name order. """
		return dict(sorted(self.items()))


class ExactScope(Scope):
	def __init__(self):
		self._values = {}

	def lookup(self, name: str) -> NUMBER:
		try: return self._values[name]
		except KeyError: raise Absent(name) from None

	def assign(self, name: str, value: NUMBER) -> NUMBER:
		self._values[name] = value
		return value

	def items(self): return iter(self._values.items())


class FoldedScope(Scope):
	""" Keyed by the case-folded name; each entry also keeps the spelling it was born with. """
	def __init__(self):
		self._entries = {}

	@staticmethod
	def _key(name: str) -> str: return name.lower()

	def lookup(self, name: str) -> NUMBER:
		try: return self._entries[self._key(name)][1]
		except KeyError: raise Absent(name) from None

	def assign(self, name: str, value: NUMBER) -> NUMBER:
		key = self._key(name)
		spelling = self._entries[key][0] if key in self._entries else name
		self._entries[key] = spelling, value
		return value

	def items(self): return iter(self._entries.values())
