# datetimekit/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (unit codes, dates, tables, zones).
    Should NOT print traceback.
    """


class InvalidUnitCode(UserInputError):
    """unit code 不在 d/w/m/q/y/h/M/s/l 之内"""

    def __init__(self, part):
        self.part = part
        super().__init__(f"未知 unit code: {part!r} (expected one of d, w, m, q, y, h, M, s, l)")


class CoercionFailure(UserInputError):
    """输入无法转换为 Timestamp"""

    def __init__(self, value, reason: str = ""):
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"无法转换为 Timestamp: {value!r}{detail}")


class InvalidNameTable(UserInputError):
    """weekday / month 名称表长度不对"""


class InvalidTimeZone(UserInputError):
    """时区名称无法解析"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"未知时区: {name!r}")
