"""Built-in catalog records.

Pure data — one (title, summary) pair per entry, grouped by category in
index document order.  ``RECORDS`` flattens the tables into the plain dicts
the loader validates; ids and reference paths are derived from the titles.
"""

from __future__ import annotations

from refcat.models import Category, slugify

_TECHNIQUES: dict[str, list[tuple[str, str]]] = {
    "Composing Methods": [
        ("Extract Method",
         "Move a code fragment that can be grouped together into a separate new method and replace the old code with a call to it."),
        ("Inline Method",
         "Replace calls to a method whose body is more obvious than the method itself with the method's content, then delete the method."),
        ("Extract Variable",
         "Place the result of a hard-to-understand expression or its parts in separate self-explanatory variables."),
        ("Inline Temp",
         "Replace references to a temporary variable that holds a simple expression result with the expression itself."),
        ("Replace Temp with Query",
         "Move an expression stored in a local variable into a separate method and return the result from it instead."),
        ("Split Temporary Variable",
         "Use a separate variable for each value when one local variable is reused to store various intermediate values."),
        ("Remove Assignments to Parameters",
         "Use a local variable instead of assigning a new value to a parameter inside the method body."),
        ("Replace Method with Method Object",
         "Transform a long method whose local variables are too intertwined to extract into a separate class so the locals become fields."),
        ("Substitute Algorithm",
         "Replace the body of a method that implements an algorithm with a clearer or simpler new algorithm."),
    ],
    "Moving Features between Objects": [
        ("Move Method",
         "Create a new method in the class that uses the method the most, then move the code from the old method there."),
        ("Move Field",
         "Create a field in a new class that uses it more than its own class and redirect all users of the old field to it."),
        ("Extract Class",
         "Split a class doing the work of two by creating a new class and placing the fields and methods responsible for the relevant functionality in it."),
        ("Inline Class",
         "Move all features from a class that does almost nothing into another class and delete it."),
        ("Hide Delegate",
         "Create a method in the server class that delegates the call so the client no longer navigates to the delegate object."),
        ("Remove Middle Man",
         "Delete methods that only delegate to another object and make the client call the end object directly."),
        ("Introduce Foreign Method",
         "Add a method to a client class that takes an instance of a utility class you cannot change as its argument."),
        ("Introduce Local Extension",
         "Create a subclass or wrapper of a utility class you cannot change that contains the extra methods you need."),
    ],
    "Organizing Data": [
        ("Self Encapsulate Field",
         "Create a getter and setter for a field and use only them to access it, even inside the class."),
        ("Replace Data Value with Object",
         "Turn a data field that has behavior of its own into a separate class and place the field and its behavior there."),
        ("Change Value to Reference",
         "Convert many identical instances of a class that should be a single object into one shared reference object."),
        ("Change Reference to Value",
         "Turn a small, rarely changed reference object into an immutable value object."),
        ("Replace Array with Object",
         "Replace an array that holds various types of data with an object that has a separate field for each element."),
        ("Duplicate Observed Data",
         "Separate domain data stored in GUI classes into its own classes and keep the two synchronized through observers."),
        ("Change Unidirectional Association to Bidirectional",
         "Add the missing association to a class that needs to reach the class that already references it."),
        ("Change Bidirectional Association to Unidirectional",
         "Remove an association between two classes when one of them no longer uses the other's features."),
        ("Replace Magic Number with Symbolic Constant",
         "Replace a literal number with a specific meaning by a named constant that explains it."),
        ("Encapsulate Field",
         "Make a public field private and create access methods for it."),
        ("Encapsulate Collection",
         "Make a collection getter return a read-only value and add methods for adding and removing elements."),
        ("Replace Type Code with Class",
         "Replace a field holding a type code that does not affect behavior with a class and objects of that class."),
        ("Replace Type Code with Subclasses",
         "Create a subclass for each value of a coded type that directly affects program behavior."),
        ("Replace Type Code with State/Strategy",
         "Replace a behavior-affecting type code that cannot be subclassed with a state or strategy object."),
        ("Replace Subclass with Fields",
         "Replace subclasses that differ only in constant-returning methods with fields in the parent class."),
    ],
    "Simplifying Conditional Expressions": [
        ("Decompose Conditional",
         "Move a complex conditional and its then and else parts into separate methods with descriptive names."),
        ("Consolidate Conditional Expression",
         "Combine multiple conditionals that lead to the same result or action into a single expression."),
        ("Consolidate Duplicate Conditional Fragments",
         "Move identical code found in all branches of a conditional outside of the conditional."),
        ("Remove Control Flag",
         "Replace a boolean variable that acts as a control flag for multiple expressions with break, continue or return."),
        ("Replace Nested Conditional with Guard Clauses",
         "Isolate special checks and edge cases into separate guard clauses placed before the main checks to flatten nesting."),
        ("Replace Conditional with Polymorphism",
         "Create subclasses matching the branches of a conditional that performs actions by object type and move each branch into an overriding method."),
        ("Introduce Null Object",
         "Return a null object that exhibits default behavior instead of null to remove repeated null checks."),
        ("Introduce Assertion",
         "Replace an implicit assumption that a condition or value must be true with an explicit assertion check."),
    ],
    "Simplifying Method Calls": [
        ("Rename Method",
         "Rename a method whose name does not explain what the method does."),
        ("Add Parameter",
         "Create a new parameter to pass data a method needs but does not have."),
        ("Remove Parameter",
         "Remove a parameter that is not used in the body of a method."),
        ("Separate Query from Modifier",
         "Split a method that both returns a value and changes object state into a query method and a modifier method."),
        ("Parameterize Method",
         "Combine multiple methods that perform similar actions differing only in values into one method with a parameter."),
        ("Replace Parameter with Explicit Methods",
         "Extract each part of a method that runs different code depending on a parameter value into its own method."),
        ("Preserve Whole Object",
         "Pass the whole object instead of several values taken from it and passed as parameters."),
        ("Replace Parameter with Method Call",
         "Let a method call the query that produces a value itself instead of receiving the result as a parameter."),
        ("Introduce Parameter Object",
         "Replace a group of parameters that repeatedly appear together with an object."),
        ("Remove Setting Method",
         "Remove the setter of a field whose value should be set only at creation time."),
        ("Hide Method",
         "Make a method private or protected when it is not used by other classes."),
        ("Replace Constructor with Factory Method",
         "Create a factory method that calls the constructor when construction does more than set parameter values."),
        ("Replace Error Code with Exception",
         "Throw an exception instead of returning a special value that indicates an error."),
        ("Replace Exception with Test",
         "Replace a thrown exception where a simple test would do the job with a conditional check."),
    ],
    "Dealing with Generalization": [
        ("Pull Up Field",
         "Move a field that two subclasses have in common to the superclass."),
        ("Pull Up Method",
         "Make subclass methods that perform similar work identical and move them to the superclass."),
        ("Pull Up Constructor Body",
         "Create a superclass constructor for code that is mostly identical across subclass constructors and call it from them."),
        ("Push Down Method",
         "Move behavior implemented in a superclass but used by only one or a few subclasses into those subclasses."),
        ("Push Down Field",
         "Move a field used only in a few subclasses from the superclass into those subclasses."),
        ("Extract Subclass",
         "Create a subclass for features of a class that are used only in certain cases."),
        ("Extract Superclass",
         "Create a shared superclass for two classes with common fields and methods and move the identical parts to it."),
        ("Extract Interface",
         "Move an identical portion of the interface used by multiple clients, or shared by classes, into its own interface."),
        ("Collapse Hierarchy",
         "Merge a subclass and superclass that are practically the same."),
        ("Form Template Method",
         "Move the shared algorithm structure of subclass methods into a superclass template method and leave the differing steps in the subclasses."),
        ("Replace Inheritance with Delegation",
         "Replace a subclass that uses only part of its superclass with a field holding the superclass object and delegating methods."),
        ("Replace Delegation with Inheritance",
         "Make a class that contains many simple methods delegating to all methods of another class inherit from it."),
    ],
}

_SMELLS: dict[str, list[tuple[str, str]]] = {
    "Bloaters": [
        ("Long Method",
         "A method contains too many lines of code; anything longer than ten lines should raise questions."),
        ("Large Class",
         "A class contains many fields, methods and lines of code."),
        ("Primitive Obsession",
         "Primitives are used instead of small objects for simple tasks, constants encode information, or strings stand in for field names."),
        ("Long Parameter List",
         "A method takes more than three or four parameters."),
        ("Data Clumps",
         "Different parts of the code contain identical groups of variables, such as connection parameters, that belong in their own class."),
    ],
    "Object-Orientation Abusers": [
        ("Switch Statements",
         "A complex switch operator or sequence of if statements branches on object type."),
        ("Temporary Field",
         "Fields get values and are used only under certain circumstances and stay empty the rest of the time."),
        ("Refused Bequest",
         "A subclass uses only some of the methods and properties inherited from its parents."),
        ("Alternative Classes with Different Interfaces",
         "Two classes perform identical functions but have different method names."),
    ],
    "Change Preventers": [
        ("Divergent Change",
         "Many unrelated methods of a single class have to change whenever one kind of change is made."),
        ("Shotgun Surgery",
         "Making any modification requires many small changes to many different classes."),
        ("Parallel Inheritance Hierarchies",
         "Creating a subclass for one class forces you to create a subclass for another class."),
    ],
    "Dispensables": [
        ("Comments",
         "A method is filled with explanatory comments that compensate for code that is not self-explanatory."),
        ("Duplicate Code",
         "Two code fragments look almost identical."),
        ("Lazy Class",
         "A class does too little to justify the time spent understanding and maintaining it."),
        ("Data Class",
         "A class contains only fields and crude methods for accessing them, acting as a container used by other classes."),
        ("Dead Code",
         "A variable, parameter, field, method or class is no longer used, usually because it became obsolete."),
        ("Speculative Generality",
         "A class, method, field or parameter exists only for anticipated future needs and is never used."),
    ],
    "Couplers": [
        ("Feature Envy",
         "A method accesses the data of another object more than its own data."),
        ("Inappropriate Intimacy",
         "One class uses the internal fields and methods of another class."),
        ("Message Chains",
         "Code contains a series of calls resembling $a->b()->c()->d() and depends on the whole navigation structure."),
        ("Middle Man",
         "A class performs only one action, delegating work to another class."),
        ("Incomplete Library Class",
         "A library stops meeting user needs and cannot be changed because it is read-only."),
    ],
}


def _records(tables: dict[str, list[tuple[str, str]]], folder: str) -> list[dict[str, str]]:
    records = []
    for category_name, rows in tables.items():
        category_slug = Category.parse(category_name).slug
        for title, summary in rows:
            entry_id = slugify(title)
            records.append({
                "id": entry_id,
                "title": title,
                "category": category_name,
                "summary": summary,
                "reference_path": f"references/{folder}/{category_slug}/{entry_id}.md",
            })
    return records


RECORDS: list[dict[str, str]] = _records(_TECHNIQUES, "techniques") + _records(_SMELLS, "smells")
