class MenuError(Exception):
    pass


class DuplicateSettingName(MenuError):
    pass


class UnknownSettingName(MenuError, KeyError):
    def __str__(self):
        return Exception.__str__(self)


class InvalidConfiguration(MenuError):
    pass


class GridProviderError(MenuError):
    pass


def validate_setting_name(name):
    if not isinstance(name, str) or not name.strip():
        raise InvalidConfiguration(f"Setting name must be a non-empty string, got {name!r}")
    return True


def validate_unique_names(settings):
    seen = set()

    for setting in settings:
        if setting.name in seen:
            raise DuplicateSettingName(f"Setting name {setting.name!r} is declared more than once")
        seen.add(setting.name)

    return True


def validate_possible_values(name, possible_values):
    if possible_values is None or isinstance(possible_values, (str, bytes)):
        raise InvalidConfiguration(f"Dropdown {name!r}: possible values must be a sequence")

    values = list(possible_values)
    if len(values) == 0:
        raise InvalidConfiguration(f"Dropdown {name!r}: at least one possible value is required")

    for idx, value in enumerate(values):
        if value is None or str(value) == "":
            raise InvalidConfiguration(f"Dropdown {name!r}: value {idx} is empty")

    if len({str(v) for v in values}) != len(values):
        raise InvalidConfiguration(f"Dropdown {name!r}: possible values must be unique")

    return True


def validate_options(options):
    if not isinstance(options.sheet_name, str) or not options.sheet_name.strip():
        raise InvalidConfiguration("sheet_name must be a non-empty string")

    if len(options.sheet_name) > 31:
        raise InvalidConfiguration("sheet_name cannot be more than 31 characters")

    if not isinstance(options.title_text, str):
        raise InvalidConfiguration("title_text must be a string")

    # bool is an int subclass, reject it explicitly
    if isinstance(options.row_spacing, bool) or not isinstance(options.row_spacing, int) or options.row_spacing < 0:
        raise InvalidConfiguration(f"row_spacing must be a non-negative integer, got {options.row_spacing!r}")

    if isinstance(options.header_rows, bool) or not isinstance(options.header_rows, int) or options.header_rows < 1:
        raise InvalidConfiguration(f"header_rows must be a positive integer, got {options.header_rows!r}")

    return True
