from __future__ import division, print_function, absolute_import
import os


def OL2Strings(OL):
    """
    Flatten an OutputList into three comma separated strings: header, units, values
    """
    head = ','.join(str(item[0]) for item in OL)
    units = ','.join(str(item[1]) for item in OL)
    vals = ','.join(str(item[2]) for item in OL)
    return head, units, vals


def Write2CSV(Class, file, append=False):
    """
    This function takes in a component (or a cycle holding components) and a file
    name or file object, and writes the OutputList of everything it finds

    If the class carries sub-components with their own OutputList, a first row naming
    the component of each column is written as well
    """

    def BuildComponentList(ShapeString, string):
        return ','.join([string] * len(ShapeString.split(',')))

    head, units, vals = OL2Strings(Class.OutputList())
    headList = [head]
    unitsList = [units]
    valsList = [vals]
    componentList = [BuildComponentList(units, type(Class).__name__)]

    # Loop over the sub-components in alphabetical order
    for item in sorted(vars(Class)):
        sub = getattr(Class, item)
        if sub is Class or not hasattr(sub, 'OutputList') or isinstance(sub, type):
            continue
        try:
            OL = sub.OutputList()
        except AttributeError:
            # sub-component that was never calculated
            continue
        head, units, vals = OL2Strings(OL)
        componentList.append(BuildComponentList(units, item))
        headList.append(head)
        unitsList.append(units)
        valsList.append(vals)
    IsCycle = len(headList) > 1

    components = ','.join(componentList)
    head = ','.join(headList)
    units = ','.join(unitsList)
    vals = ','.join(valsList)

    if not isinstance(file, (str, os.PathLike)):
        # A file object was passed in, use it
        fP = file
        firstRow = True
        close = False
    else:
        firstRow = not os.path.exists(file)
        fP = open(file, 'a' if append else 'w')
        close = True

    try:
        if append and not firstRow:
            fP.write(vals + '\n')
        else:
            if IsCycle:
                fP.write(components + '\n')
            fP.write(head + '\n')
            fP.write(units + '\n')
            fP.write(vals + '\n')
    finally:
        if close:
            fP.close()


def ValidateFields(d, reqFields, optFields=None):
    """
        The function ValidateFields takes in inputs of:

        =========   =============================================================
        Variable    Type & Description
        =========   =============================================================
        d           dict of values that are part of structure
        reqFields   list of tuples in the form (fieldname, typepointer, min, max)
        optFields   list of other fieldnames
        =========   =============================================================

        required parameters are checked that they
        * exist
        * can be cast using the typepointer function pointer
        * is within the range (min,max)

        if a parameter is on the optional parameters list, it is ok-ed, but not value checked

        Additional parameters raise AttributeError
    """
    # make a copy of d
    d                   = dict(d)

    # Required parameters
    for field, typepointer, min, max in reqFields:
        if field in d:
            # See if you can do a type cast using the conversion function pointer
            # You should get the same value back
            assert typepointer(d[field]) == d[field], field + ': failed type conversion, should be ' + str(typepointer)

            # check the bounds if numeric input
            if typepointer in (float, int):
                assert d[field] >= min and d[field] <= max, field + ' (value: %g) not in the range [%g,%g]' % (d[field], min, max)

            # remove field from dictionary of terms left to check if no errors
            del d[field]
        else:
            raise AttributeError('Required field ' + field + ' not included')

    # Optional parameters (not strictly checked, just checked their existence)
    if optFields is not None:
        for field in optFields:
            if field in d:
                del d[field]
    if len(d) != 0:
        raise AttributeError('Unmatched fields found: ' + str(list(d.keys())))
