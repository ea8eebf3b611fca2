"""Legacy suffixed class: Acme/Core/Support/Arr_Helper lives in Arr.helper.py."""


class Arr_Helper:

    @staticmethod
    def flatten(items):
        return [item for sub in items for item in sub]
