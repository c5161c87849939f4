# railway3

A small observation game about railways. It generates a country split into
a grid of districts and places stations in every district. It joins the
stations into one rail network and picks a city for each district and a
capital for the central one. The map is then drawn in a window: coloured
district tiles, stations as circles sized by their status, and rail lines
between them.

## Installing

```
pip install .
```

The window uses Tkinter from the standard library. No other packages are
needed.

## Running

```
railway3
```

This opens the main window (`railway3.app.main`). Choose
**Головне меню → Згенерувати Україну** to generate a new map. Each time
you choose it, a fresh map is drawn. **Вийти** closes the program. The
**Інформація** menu has two items, **Про програму** and **Про гру**. They
show a short note about the program and about the game.

## Using the library

You can generate and inspect a map without a window:

```python
import random

from railway3.railmap import RailwayMap

railway = RailwayMap(300, 300, 3, 3, 5, random.Random(7))
railway.generate()
print(len(railway.stations), len(railway.ways))
```

The arguments are, in order:

- the map width and height;
- the number of district columns and rows;
- the number of stations per district;
- an optional random generator.

If you leave them out, the map is 300×300 with 3×3 districts of 5 stations
each.

`RailwayMap.generate()` does four things:

- places the stations (`railway3.station.Station`);
- links them into a single network (`ways`, pairs of station indices);
- sets the `StationStatus` of each district's main station;
- fills the grid of district colours (`colors`, values of `Color`).

`RailwayMap.find_train_position(train, time)` takes a `railway3.train.Train`,
whose stops are `railway3.schedule.Schedule` values, and a
`railway3.timepoint.TimePoint`. It returns the train's `Point` on the map at
that time. If the train is not on the map, it returns `Point(-1, -1)`.

`railway3.display.Display` turns a generated map into plain drawing data for
any canvas:

- `Display.districts(width, height)` returns `DistrictTile` values.
- `Display.stations_and_ways(width, height)` returns `StationMark` and
  `WayLine` values.

Both are scaled to the given size.

`TimePoint` values are times of day in hours and minutes:

- `add_minutes()` and `subtract_minutes()` return new times and wrap around
  midnight.
- `minutes_to()` always counts forward.

## What it does not do

The window shows a generated map and nothing more. Some menu items have no
action yet:

- loading and saving maps;
- creating, removing or viewing trains, and changing departure times;
- laying or removing lines, viewing stations and finding routes;
- the **Запуск** menu, which is empty.

Map generation never creates trains. `find_train_position` only works with
trains and timetables that you build yourself.

## Tests

```
pip install .[test]
pytest
```