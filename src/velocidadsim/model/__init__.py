"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the chart widgets (pyqtgraph).
It deals with the kinematics and the calculator state.
"""
