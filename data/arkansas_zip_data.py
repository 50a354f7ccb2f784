"""
Arkansas ZIP code to county mapping and county effective property tax rates.

Rates are percentages of market value (median taxes paid vs. median home value).
Sources: US Census Bureau / USPS for ZIP codes; Arkansas DFA and tax-rates.org
for county rates.
"""

COUNTY_TAX_RATES: dict[str, float] = {
    "Arkansas": 0.48,
    "Ashley": 0.52,
    "Baxter": 0.45,
    "Benton": 0.60,
    "Boone": 0.42,
    "Bradley": 0.55,
    "Calhoun": 0.53,
    "Carroll": 0.48,
    "Chicot": 0.62,
    "Clark": 0.50,
    "Clay": 0.55,
    "Cleburne": 0.42,
    "Cleveland": 0.52,
    "Columbia": 0.58,
    "Conway": 0.48,
    "Craighead": 0.58,
    "Crawford": 0.50,
    "Crittenden": 0.65,
    "Cross": 0.55,
    "Dallas": 0.52,
    "Desha": 0.58,
    "Drew": 0.52,
    "Faulkner": 0.55,
    "Franklin": 0.45,
    "Fulton": 0.40,
    "Garland": 0.48,
    "Grant": 0.50,
    "Greene": 0.52,
    "Hempstead": 0.55,
    "Hot Spring": 0.48,
    "Howard": 0.50,
    "Independence": 0.48,
    "Izard": 0.42,
    "Jackson": 0.55,
    "Jefferson": 0.62,
    "Johnson": 0.48,
    "Lafayette": 0.55,
    "Lawrence": 0.50,
    "Lee": 0.58,
    "Lincoln": 0.55,
    "Little River": 0.52,
    "Logan": 0.48,
    "Lonoke": 0.55,
    "Madison": 0.45,
    "Marion": 0.42,
    "Miller": 0.55,
    "Mississippi": 0.60,
    "Monroe": 0.55,
    "Montgomery": 0.42,
    "Nevada": 0.52,
    "Newton": 0.38,
    "Ouachita": 0.55,
    "Perry": 0.45,
    "Phillips": 0.62,
    "Pike": 0.48,
    "Poinsett": 0.55,
    "Polk": 0.42,
    "Pope": 0.50,
    "Prairie": 0.52,
    "Pulaski": 0.65,
    "Randolph": 0.50,
    "Saline": 0.55,
    "Scott": 0.45,
    "Searcy": 0.38,
    "Sebastian": 0.55,
    "Sevier": 0.48,
    "Sharp": 0.45,
    "St. Francis": 0.58,
    "Stone": 0.40,
    "Union": 0.55,
    "Van Buren": 0.42,
    "Washington": 0.55,
    "White": 0.52,
    "Woodruff": 0.55,
    "Yell": 0.48,
}

# (zip, city, county), grouped by county. Order matters: search results keep table order.
ZIP_CODES: list[tuple[str, str, str]] = [
    # Jefferson County
    ("71601", "Pine Bluff", "Jefferson"),
    ("71602", "White Hall", "Jefferson"),
    ("71603", "Pine Bluff", "Jefferson"),
    ("71611", "Pine Bluff", "Jefferson"),
    ("71612", "White Hall", "Jefferson"),
    ("71613", "Pine Bluff", "Jefferson"),

    # Desha County
    ("71630", "Arkansas City", "Desha"),
    ("71639", "Dumas", "Desha"),
    ("71654", "McGehee", "Desha"),
    ("71666", "Rohwer", "Desha"),
    ("71670", "Reed", "Desha"),
    ("71674", "Watson", "Desha"),
    ("72379", "Snow Lake", "Desha"),

    # Bradley County
    ("71631", "Banks", "Bradley"),
    ("71647", "Hermitage", "Bradley"),
    ("71651", "Jersey", "Bradley"),
    ("71671", "Warren", "Bradley"),

    # Ashley County
    ("71635", "Crossett", "Ashley"),
    ("71642", "Fountain Hill", "Ashley"),
    ("71646", "Hamburg", "Ashley"),
    ("71658", "Montrose", "Ashley"),
    ("71661", "Parkdale", "Ashley"),
    ("71663", "Portland", "Ashley"),
    ("71676", "Wilmot", "Ashley"),

    # Chicot County
    ("71638", "Dermott", "Chicot"),
    ("71640", "Eudora", "Chicot"),
    ("71653", "Lake Village", "Chicot"),

    # Lincoln County
    ("71643", "Gould", "Lincoln"),
    ("71644", "Grady", "Lincoln"),
    ("71667", "Star City", "Lincoln"),

    # Cleveland County
    ("71652", "Kingsland", "Cleveland"),
    ("71660", "New Edinburg", "Cleveland"),
    ("71665", "Rison", "Cleveland"),

    # Drew County
    ("71655", "Monticello", "Drew"),
    ("71656", "Monticello", "Drew"),
    ("71657", "Monticello", "Drew"),
    ("71675", "Wilmar", "Drew"),
    ("71677", "Winchester", "Drew"),

    # Ouachita County
    ("71720", "Bearden", "Ouachita"),
    ("71726", "Reader", "Ouachita"),
    ("71751", "Louann", "Ouachita"),
    ("71764", "Stephens", "Ouachita"),

    # Nevada County
    ("71722", "Bluff City", "Nevada"),
    ("71835", "Emmet", "Nevada"),
    ("71857", "Prescott", "Nevada"),
    ("71858", "Rosston", "Nevada"),

    # Union County
    ("71724", "Calion", "Union"),
    ("71730", "El Dorado", "Union"),
    ("71731", "El Dorado", "Union"),
    ("71747", "Huttig", "Union"),
    ("71749", "Junction City", "Union"),
    ("71758", "Mount Holly", "Union"),
    ("71759", "Norphlet", "Union"),
    ("71762", "Smackover", "Union"),
    ("71765", "Strong", "Union"),

    # Dallas County
    ("71725", "Carthage", "Dallas"),
    ("71742", "Fordyce", "Dallas"),
    ("71763", "Manning", "Dallas"),

    # Calhoun County
    ("71744", "Hampton", "Calhoun"),
    ("71745", "Harrell", "Calhoun"),
    ("71766", "Thornton", "Calhoun"),

    # Columbia County
    ("71740", "Emerson", "Columbia"),
    ("71752", "McNeil", "Columbia"),
    ("71753", "Magnolia", "Columbia"),
    ("71754", "Magnolia", "Columbia"),
    ("71770", "Waldo", "Columbia"),
    ("71861", "Taylor", "Columbia"),

    # Clark County
    ("71743", "Gurdon", "Clark"),
    ("71921", "Amity", "Clark"),
    ("71923", "Arkadelphia", "Clark"),
    ("71962", "Okolona", "Clark"),

    # Little River County
    ("71820", "Alleene", "Little River"),
    ("71822", "Ashdown", "Little River"),
    ("71836", "Foreman", "Little River"),
    ("71853", "Ogden", "Little River"),
    ("71865", "Wilton", "Little River"),
    ("71866", "Winthrop", "Little River"),

    # Sevier County
    ("71823", "Ben Lomond", "Sevier"),
    ("71832", "De Queen", "Sevier"),
    ("71841", "Gillham", "Sevier"),
    ("71842", "Horatio", "Sevier"),
    ("71846", "Lockesburg", "Sevier"),

    # Hempstead County
    ("71825", "Blevins", "Hempstead"),
    ("71838", "Fulton", "Hempstead"),
    ("71847", "McCaskill", "Hempstead"),
    ("71855", "Ozan", "Hempstead"),
    ("71862", "Washington", "Hempstead"),
    ("71801", "Hope", "Hempstead"),
    ("71802", "Hope", "Hempstead"),

    # Lafayette County
    ("71826", "Bradley", "Lafayette"),
    ("71827", "Buckner", "Lafayette"),
    ("71845", "Lewisville", "Lafayette"),
    ("71860", "Stamps", "Lafayette"),

    # Miller County
    ("71834", "Doddridge", "Miller"),
    ("71837", "Fouke", "Miller"),
    ("71839", "Garland City", "Miller"),
    ("71854", "Texarkana", "Miller"),

    # Howard County
    ("71833", "Dierks", "Howard"),
    ("71851", "Mineral Springs", "Howard"),
    ("71852", "Nashville", "Howard"),
    ("71859", "Saratoga", "Howard"),
    ("71971", "Umpire", "Howard"),

    # Garland County
    ("71901", "Hot Springs", "Garland"),
    ("71902", "Hot Springs", "Garland"),
    ("71903", "Hot Springs", "Garland"),
    ("71909", "Hot Springs Village", "Garland"),
    ("71910", "Hot Springs Village", "Garland"),
    ("71913", "Hot Springs", "Garland"),
    ("71914", "Hot Springs", "Garland"),
    ("71949", "Jessieville", "Garland"),
    ("71956", "Mountain Pine", "Garland"),
    ("71964", "Pearcy", "Garland"),
    ("71968", "Royal", "Garland"),
    ("72087", "Lonsdale", "Garland"),

    # Hot Spring County
    ("71929", "Bismarck", "Hot Spring"),
    ("71933", "Bonnerdale", "Hot Spring"),
    ("71941", "Donaldson", "Hot Spring"),
    ("72104", "Malvern", "Hot Spring"),
    ("72105", "Jones Mill", "Hot Spring"),

    # Montgomery County
    ("71935", "Caddo Gap", "Montgomery"),
    ("71957", "Mount Ida", "Montgomery"),
    ("71960", "Norman", "Montgomery"),
    ("71961", "Oden", "Montgomery"),
    ("71965", "Pencil Bluff", "Montgomery"),
    ("71969", "Sims", "Montgomery"),
    ("71970", "Story", "Montgomery"),

    # Pike County
    ("71922", "Antoine", "Pike"),
    ("71940", "Delight", "Pike"),
    ("71943", "Glenwood", "Pike"),
    ("71950", "Kirby", "Pike"),
    ("71952", "Langley", "Pike"),
    ("71958", "Murfreesboro", "Pike"),
    ("71959", "Newhope", "Pike"),

    # Polk County
    ("71937", "Cove", "Polk"),
    ("71944", "Grannis", "Polk"),
    ("71945", "Hatfield", "Polk"),
    ("71953", "Mena", "Polk"),
    ("71972", "Vandervoort", "Polk"),
    ("71973", "Wickes", "Polk"),

    # Perry County
    ("72001", "Adona", "Perry"),
    ("72016", "Bigelow", "Perry"),
    ("72025", "Casa", "Perry"),
    ("72070", "Houston", "Perry"),
    ("72126", "Perryville", "Perry"),

    # Saline County
    ("72002", "Alexander", "Saline"),
    ("72011", "Bauxite", "Saline"),
    ("72015", "Benton", "Saline"),
    ("72019", "Benton", "Saline"),
    ("72022", "Bryant", "Saline"),
    ("72065", "Hensley", "Saline"),
    ("72103", "Mabelvale", "Saline"),
    ("72122", "Paron", "Saline"),
    ("72167", "Traskwood", "Saline"),

    # Arkansas County
    ("72003", "Almyra", "Arkansas"),
    ("72026", "Casscoe", "Arkansas"),
    ("72038", "Crocketts Bluff", "Arkansas"),
    ("72042", "DeWitt", "Arkansas"),
    ("72048", "Ethel", "Arkansas"),
    ("72055", "Gillett", "Arkansas"),
    ("72073", "Humphrey", "Arkansas"),
    ("72140", "Saint Charles", "Arkansas"),
    ("72160", "Stuttgart", "Arkansas"),
    ("72166", "Tichnor", "Arkansas"),

    # Lonoke County
    ("72007", "Austin", "Lonoke"),
    ("72023", "Cabot", "Lonoke"),
    ("72024", "Carlisle", "Lonoke"),
    ("72046", "England", "Lonoke"),
    ("72072", "Humnoke", "Lonoke"),
    ("72083", "Keo", "Lonoke"),
    ("72086", "Lonoke", "Lonoke"),
    ("72142", "Scott", "Lonoke"),
    ("72176", "Ward", "Lonoke"),

    # White County
    ("72010", "Bald Knob", "White"),
    ("72012", "Beebe", "White"),
    ("72020", "Bradford", "White"),
    ("72045", "El Paso", "White"),
    ("72060", "Griffithville", "White"),
    ("72068", "Higginson", "White"),
    ("72081", "Judsonia", "White"),
    ("72082", "Kensett", "White"),
    ("72085", "Letona", "White"),
    ("72102", "McRae", "White"),
    ("72121", "Pangburn", "White"),
    ("72136", "Romance", "White"),
    ("72137", "Rose Bud", "White"),
    ("72139", "Russell", "White"),
    ("72143", "Searcy", "White"),
    ("72145", "Searcy", "White"),

    # Woodruff County
    ("72006", "Augusta", "Woodruff"),
    ("72036", "Cotton Plant", "Woodruff"),
    ("72074", "Hunter", "Woodruff"),
    ("72101", "McCrory", "Woodruff"),
    ("72123", "Patterson", "Woodruff"),

    # Jackson County
    ("72005", "Amagon", "Jackson"),
    ("72014", "Beedeville", "Jackson"),
    ("72043", "Diaz", "Jackson"),
    ("72075", "Jacksonport", "Jackson"),
    ("72112", "Newport", "Jackson"),
    ("72431", "Grubbs", "Jackson"),
    ("72471", "Swifton", "Jackson"),
    ("72473", "Tuckerman", "Jackson"),

    # Van Buren County
    ("72013", "Bee Branch", "Van Buren"),
    ("72031", "Clinton", "Van Buren"),
    ("72080", "Jerusalem", "Van Buren"),
    ("72088", "Fairfield Bay", "Van Buren"),
    ("72141", "Scotland", "Van Buren"),
    ("72153", "Shirley", "Van Buren"),
    ("72629", "Dennard", "Van Buren"),

    # Faulkner County
    ("72032", "Conway", "Faulkner"),
    ("72033", "Conway", "Faulkner"),
    ("72034", "Conway", "Faulkner"),
    ("72035", "Conway", "Faulkner"),
    ("72039", "Twin Groves", "Faulkner"),
    ("72047", "Enola", "Faulkner"),
    ("72058", "Greenbrier", "Faulkner"),
    ("72061", "Guy", "Faulkner"),
    ("72106", "Mayflower", "Faulkner"),
    ("72111", "Mount Vernon", "Faulkner"),
    ("72173", "Vilonia", "Faulkner"),
    ("72181", "Wooster", "Faulkner"),

    # Conway County
    ("72027", "Center Ridge", "Conway"),
    ("72030", "Cleveland", "Conway"),
    ("72063", "Hattieville", "Conway"),
    ("72107", "Menifee", "Conway"),
    ("72110", "Morrilton", "Conway"),
    ("72125", "Perry", "Conway"),
    ("72127", "Plumerville", "Conway"),
    ("72156", "Solgohachia", "Conway"),
    ("72157", "Springfield", "Conway"),

    # Monroe County
    ("72021", "Brinkley", "Monroe"),
    ("72029", "Clarendon", "Monroe"),
    ("72069", "Holly Grove", "Monroe"),
    ("72108", "Monroe", "Monroe"),
    ("72134", "Roe", "Monroe"),

    # Prairie County
    ("72017", "Biscoe", "Prairie"),
    ("72040", "Des Arc", "Prairie"),
    ("72041", "De Valls Bluff", "Prairie"),
    ("72064", "Hazen", "Prairie"),
    ("72170", "Ulm", "Prairie"),

    # Grant County
    ("72057", "Grapevine", "Grant"),
    ("72084", "Leola", "Grant"),
    ("72128", "Poyen", "Grant"),
    ("72129", "Prattsville", "Grant"),
    ("72150", "Sheridan", "Grant"),

    # Cleburne County
    ("72044", "Edgemont", "Cleburne"),
    ("72067", "Greers Ferry", "Cleburne"),
    ("72130", "Prim", "Cleburne"),
    ("72131", "Quitman", "Cleburne"),
    ("72179", "Wilburn", "Cleburne"),
    ("72523", "Concord", "Cleburne"),
    ("72530", "Drasco", "Cleburne"),
    ("72543", "Heber Springs", "Cleburne"),
    ("72581", "Tumbling Shoals", "Cleburne"),

    # Pulaski County
    ("72053", "College Station", "Pulaski"),
    ("72076", "Jacksonville", "Pulaski"),
    ("72078", "Jacksonville", "Pulaski"),
    ("72099", "Little Rock AFB", "Pulaski"),
    ("72113", "Maumelle", "Pulaski"),
    ("72114", "North Little Rock", "Pulaski"),
    ("72115", "North Little Rock", "Pulaski"),
    ("72116", "North Little Rock", "Pulaski"),
    ("72117", "North Little Rock", "Pulaski"),
    ("72118", "North Little Rock", "Pulaski"),
    ("72119", "North Little Rock", "Pulaski"),
    ("72120", "Sherwood", "Pulaski"),
    ("72124", "North Little Rock", "Pulaski"),
    ("72135", "Roland", "Pulaski"),
    ("72180", "Woodson", "Pulaski"),
    ("72183", "Wrightsville", "Pulaski"),
    ("72190", "Little Rock", "Pulaski"),
    ("72199", "Little Rock", "Pulaski"),
    ("72201", "Little Rock", "Pulaski"),
    ("72202", "Little Rock", "Pulaski"),
    ("72203", "Little Rock", "Pulaski"),
    ("72204", "Little Rock", "Pulaski"),
    ("72205", "Little Rock", "Pulaski"),
    ("72206", "Little Rock", "Pulaski"),
    ("72207", "Little Rock", "Pulaski"),
    ("72209", "Little Rock", "Pulaski"),
    ("72210", "Little Rock", "Pulaski"),
    ("72211", "Little Rock", "Pulaski"),
    ("72212", "Little Rock", "Pulaski"),
    ("72214", "Little Rock", "Pulaski"),
    ("72215", "Little Rock", "Pulaski"),
    ("72216", "Little Rock", "Pulaski"),
    ("72217", "Little Rock", "Pulaski"),
    ("72219", "Little Rock", "Pulaski"),
    ("72221", "Little Rock", "Pulaski"),
    ("72222", "Little Rock", "Pulaski"),
    ("72223", "Little Rock", "Pulaski"),
    ("72225", "Little Rock", "Pulaski"),
    ("72227", "Little Rock", "Pulaski"),
    ("72231", "Little Rock", "Pulaski"),
    ("72260", "Little Rock", "Pulaski"),
    ("72295", "Little Rock", "Pulaski"),

    # Crittenden County
    ("72301", "West Memphis", "Crittenden"),
    ("72303", "West Memphis", "Crittenden"),
    ("72327", "Crawfordsville", "Crittenden"),
    ("72331", "Earle", "Crittenden"),
    ("72332", "Edmondson", "Crittenden"),
    ("72339", "Gilmore", "Crittenden"),
    ("72364", "Marion", "Crittenden"),
    ("72376", "Proctor", "Crittenden"),
    ("72384", "Turrell", "Crittenden"),

    # Lee County
    ("72311", "Aubrey", "Lee"),
    ("72320", "Brickeys", "Lee"),
    ("72341", "Haynes", "Lee"),
    ("72360", "Marianna", "Lee"),
    ("72368", "Moro", "Lee"),

    # Mississippi County
    ("72315", "Blytheville", "Mississippi"),
    ("72316", "Blytheville", "Mississippi"),
    ("72321", "Burdette", "Mississippi"),
    ("72329", "Driver", "Mississippi"),
    ("72330", "Dyess", "Mississippi"),
    ("72338", "Frenchmans Bayou", "Mississippi"),
    ("72350", "Joiner", "Mississippi"),
    ("72351", "Keiser", "Mississippi"),
    ("72358", "Luxora", "Mississippi"),
    ("72370", "Osceola", "Mississippi"),
    ("72395", "Wilson", "Mississippi"),
    ("72426", "Dell", "Mississippi"),
    ("72428", "Etowah", "Mississippi"),
    ("72438", "Leachville", "Mississippi"),
    ("72442", "Manila", "Mississippi"),

    # St. Francis County
    ("72322", "Caldwell", "St. Francis"),
    ("72326", "Colt", "St. Francis"),
    ("72335", "Forrest City", "St. Francis"),
    ("72336", "Forrest City", "St. Francis"),
    ("72340", "Goodwin", "St. Francis"),
    ("72346", "Heth", "St. Francis"),
    ("72348", "Hughes", "St. Francis"),
    ("72359", "Madison", "St. Francis"),
    ("72372", "Palestine", "St. Francis"),
    ("72392", "Wheatley", "St. Francis"),
    ("72394", "Widener", "St. Francis"),

    # Cross County
    ("72324", "Cherry Valley", "Cross"),
    ("72347", "Hickory Ridge", "Cross"),
    ("72373", "Parkin", "Cross"),
    ("72387", "Vanndale", "Cross"),
    ("72396", "Wynne", "Cross"),

    # Phillips County
    ("72328", "Crumrod", "Phillips"),
    ("72333", "Elaine", "Phillips"),
    ("72342", "Helena", "Phillips"),
    ("72353", "Lambrook", "Phillips"),
    ("72355", "Lexa", "Phillips"),
    ("72366", "Marvell", "Phillips"),
    ("72367", "Mellwood", "Phillips"),
    ("72369", "Oneida", "Phillips"),
    ("72374", "Poplar Grove", "Phillips"),
    ("72383", "Turner", "Phillips"),
    ("72389", "Wabash", "Phillips"),
    ("72390", "West Helena", "Phillips"),

    # Poinsett County
    ("72354", "Lepanto", "Poinsett"),
    ("72365", "Marked Tree", "Poinsett"),
    ("72377", "Rivervale", "Poinsett"),
    ("72386", "Tyronza", "Poinsett"),
    ("72429", "Fisher", "Poinsett"),
    ("72432", "Harrisburg", "Poinsett"),
    ("72472", "Trumann", "Poinsett"),
    ("72475", "Waldenburg", "Poinsett"),
    ("72479", "Weiner", "Poinsett"),

    # Craighead County
    ("72401", "Jonesboro", "Craighead"),
    ("72402", "Jonesboro", "Craighead"),
    ("72403", "Jonesboro", "Craighead"),
    ("72404", "Jonesboro", "Craighead"),
    ("72411", "Bay", "Craighead"),
    ("72414", "Black Oak", "Craighead"),
    ("72416", "Bono", "Craighead"),
    ("72417", "Brookland", "Craighead"),
    ("72419", "Caraway", "Craighead"),
    ("72421", "Cash", "Craighead"),
    ("72427", "Egypt", "Craighead"),
    ("72437", "Lake City", "Craighead"),
    ("72447", "Monette", "Craighead"),
    ("72467", "State University", "Craighead"),

    # Greene County
    ("72412", "Beech Grove", "Greene"),
    ("72425", "Delaplaine", "Greene"),
    ("72436", "Lafe", "Greene"),
    ("72443", "Marmaduke", "Greene"),
    ("72450", "Paragould", "Greene"),
    ("72451", "Paragould", "Greene"),

    # Clay County
    ("72422", "Corning", "Clay"),
    ("72424", "Datto", "Clay"),
    ("72430", "Greenway", "Clay"),
    ("72435", "Knobel", "Clay"),
    ("72441", "McDougal", "Clay"),
    ("72453", "Peach Orchard", "Clay"),
    ("72454", "Piggott", "Clay"),
    ("72456", "Pollard", "Clay"),
    ("72461", "Rector", "Clay"),
    ("72464", "Saint Francis", "Clay"),
    ("72470", "Success", "Clay"),

    # Randolph County
    ("72413", "Biggers", "Randolph"),
    ("72444", "Maynard", "Randolph"),
    ("72449", "OKean", "Randolph"),
    ("72455", "Pocahontas", "Randolph"),
    ("72460", "Ravenden Springs", "Randolph"),
    ("72462", "Reyno", "Randolph"),
    ("72478", "Warm Springs", "Randolph"),

    # Lawrence County
    ("72410", "Alicia", "Lawrence"),
    ("72415", "Black Rock", "Lawrence"),
    ("72433", "Hoxie", "Lawrence"),
    ("72434", "Imboden", "Lawrence"),
    ("72440", "Lynn", "Lawrence"),
    ("72445", "Minturn", "Lawrence"),
    ("72457", "Portia", "Lawrence"),
    ("72458", "Powhatan", "Lawrence"),
    ("72459", "Ravenden", "Lawrence"),
    ("72466", "Smithville", "Lawrence"),
    ("72469", "Strawberry", "Lawrence"),
    ("72476", "Walnut Ridge", "Lawrence"),
    ("72572", "Saffell", "Lawrence"),

    # Independence County
    ("72501", "Batesville", "Independence"),
    ("72503", "Batesville", "Independence"),
    ("72522", "Charlotte", "Independence"),
    ("72524", "Cord", "Independence"),
    ("72526", "Cushman", "Independence"),
    ("72527", "Desha", "Independence"),
    ("72534", "Floral", "Independence"),
    ("72550", "Locust Grove", "Independence"),
    ("72553", "Magness", "Independence"),
    ("72562", "Newark", "Independence"),
    ("72564", "Oil Trough", "Independence"),
    ("72568", "Pleasant Plains", "Independence"),
    ("72571", "Rosie", "Independence"),
    ("72579", "Sulphur Rock", "Independence"),
    ("72165", "Thida", "Independence"),

    # Sharp County
    ("72513", "Agnos", "Sharp"),
    ("72521", "Cave City", "Sharp"),
    ("72529", "Cherokee Village", "Sharp"),
    ("72532", "Evening Shade", "Sharp"),
    ("72542", "Hardy", "Sharp"),
    ("72569", "Poughkeepsie", "Sharp"),
    ("72577", "Sidney", "Sharp"),
    ("72482", "Williford", "Sharp"),

    # Izard County
    ("72512", "Horseshoe Bend", "Izard"),
    ("72517", "Brockwell", "Izard"),
    ("72519", "Calico Rock", "Izard"),
    ("72528", "Dolph", "Izard"),
    ("72536", "Franklin", "Izard"),
    ("72540", "Guion", "Izard"),
    ("72556", "Melbourne", "Izard"),
    ("72561", "Mount Pleasant", "Izard"),
    ("72565", "Oxford", "Izard"),
    ("72566", "Pineville", "Izard"),
    ("72573", "Sage", "Izard"),
    ("72584", "Violet Hill", "Izard"),
    ("72585", "Wideman", "Izard"),
    ("72587", "Wiseman", "Izard"),

    # Fulton County
    ("72515", "Bexar", "Fulton"),
    ("72520", "Camp", "Fulton"),
    ("72525", "Cherokee Village", "Fulton"),
    ("72531", "Elizabeth", "Fulton"),
    ("72538", "Gepp", "Fulton"),
    ("72539", "Glencoe", "Fulton"),
    ("72554", "Mammoth Spring", "Fulton"),
    ("72576", "Salem", "Fulton"),
    ("72578", "Sturkie", "Fulton"),
    ("72583", "Viola", "Fulton"),

    # Stone County
    ("72051", "Fox", "Stone"),
    ("72533", "Fifty Six", "Stone"),
    ("72555", "Marcella", "Stone"),
    ("72560", "Mountain View", "Stone"),
    ("72567", "Pleasant Grove", "Stone"),
    ("72663", "Onia", "Stone"),
    ("72680", "Timbo", "Stone"),

    # Baxter County
    ("72537", "Gamaliel", "Baxter"),
    ("72544", "Henderson", "Baxter"),
    ("72617", "Big Flat", "Baxter"),
    ("72623", "Clarkridge", "Baxter"),
    ("72626", "Cotter", "Baxter"),
    ("72635", "Gassville", "Baxter"),
    ("72642", "Lakeview", "Baxter"),
    ("72651", "Midway", "Baxter"),
    ("72653", "Mountain Home", "Baxter"),
    ("72654", "Mountain Home", "Baxter"),
    ("72658", "Norfork", "Baxter"),

    # Boone County
    ("72601", "Harrison", "Boone"),
    ("72602", "Harrison", "Boone"),
    ("72630", "Diamond City", "Boone"),
    ("72633", "Everton", "Boone"),
    ("72644", "Lead Hill", "Boone"),
    ("72662", "Omaha", "Boone"),

    # Marion County
    ("72619", "Bull Shoals", "Marion"),
    ("72634", "Flippin", "Marion"),
    ("72661", "Oakland", "Marion"),
    ("72668", "Peel", "Marion"),
    ("72672", "Pyatt", "Marion"),
    ("72677", "Summit", "Marion"),
    ("72682", "Valley Springs", "Marion"),
    ("72687", "Yellville", "Marion"),

    # Carroll County
    ("72611", "Alpena", "Carroll"),
    ("72616", "Berryville", "Carroll"),
    ("72631", "Eureka Springs", "Carroll"),
    ("72632", "Eureka Springs", "Carroll"),
    ("72638", "Green Forest", "Carroll"),
    ("72660", "Oak Grove", "Carroll"),

    # Newton County
    ("72624", "Compton", "Newton"),
    ("72628", "Deer", "Newton"),
    ("72640", "Hasty", "Newton"),
    ("72641", "Jasper", "Newton"),
    ("72648", "Marble Falls", "Newton"),
    ("72655", "Mount Judea", "Newton"),
    ("72666", "Parthenon", "Newton"),
    ("72683", "Vendor", "Newton"),
    ("72685", "Western Grove", "Newton"),
    ("72856", "Pelsor", "Newton"),

    # Searcy County
    ("72610", "Alco", "Searcy"),
    ("72639", "Harriet", "Searcy"),
    ("72645", "Leslie", "Searcy"),
    ("72650", "Marshall", "Searcy"),
    ("72669", "Pindall", "Searcy"),
    ("72675", "Saint Joe", "Searcy"),
    ("72686", "Witts Springs", "Searcy"),

    # Washington County
    ("72701", "Fayetteville", "Washington"),
    ("72702", "Fayetteville", "Washington"),
    ("72703", "Fayetteville", "Washington"),
    ("72704", "Fayetteville", "Washington"),
    ("72717", "Canehill", "Washington"),
    ("72727", "Elkins", "Washington"),
    ("72729", "Evansville", "Washington"),
    ("72730", "Farmington", "Washington"),
    ("72744", "Lincoln", "Washington"),
    ("72749", "Morrow", "Washington"),
    ("72753", "Prairie Grove", "Washington"),
    ("72762", "Springdale", "Washington"),
    ("72764", "Springdale", "Washington"),
    ("72765", "Springdale", "Washington"),
    ("72766", "Springdale", "Washington"),
    ("72769", "Summers", "Washington"),
    ("72774", "West Fork", "Washington"),
    ("72959", "Winslow", "Washington"),

    # Benton County
    ("72711", "Avoca", "Benton"),
    ("72712", "Bentonville", "Benton"),
    ("72713", "Bentonville", "Benton"),
    ("72714", "Bella Vista", "Benton"),
    ("72715", "Bella Vista", "Benton"),
    ("72716", "Bentonville", "Benton"),
    ("72718", "Cave Springs", "Benton"),
    ("72719", "Centerton", "Benton"),
    ("72722", "Decatur", "Benton"),
    ("72732", "Garfield", "Benton"),
    ("72734", "Gentry", "Benton"),
    ("72736", "Gravette", "Benton"),
    ("72739", "Hiwasse", "Benton"),
    ("72745", "Lowell", "Benton"),
    ("72747", "Maysville", "Benton"),
    ("72751", "Pea Ridge", "Benton"),
    ("72756", "Rogers", "Benton"),
    ("72757", "Rogers", "Benton"),
    ("72758", "Rogers", "Benton"),
    ("72761", "Siloam Springs", "Benton"),
    ("72768", "Sulphur Springs", "Benton"),

    # Madison County
    ("72721", "Combs", "Madison"),
    ("72738", "Hindsville", "Madison"),
    ("72740", "Huntsville", "Madison"),
    ("72742", "Kingston", "Madison"),
    ("72752", "Pettigrew", "Madison"),
    ("72760", "Saint Paul", "Madison"),
    ("72773", "Wesley", "Madison"),
    ("72776", "Witter", "Madison"),

    # Pope County
    ("72679", "Tilly", "Pope"),
    ("72801", "Russellville", "Pope"),
    ("72802", "Russellville", "Pope"),
    ("72811", "Russellville", "Pope"),
    ("72812", "Russellville", "Pope"),
    ("72823", "Atkins", "Pope"),
    ("72837", "Dover", "Pope"),
    ("72843", "Hector", "Pope"),
    ("72847", "London", "Pope"),
    ("72858", "Pottsville", "Pope"),

    # Johnson County
    ("72830", "Clarksville", "Johnson"),
    ("72832", "Coal Hill", "Johnson"),
    ("72839", "Hagarville", "Johnson"),
    ("72840", "Hartman", "Johnson"),
    ("72845", "Knoxville", "Johnson"),
    ("72846", "Lamar", "Johnson"),
    ("72852", "Oark", "Johnson"),
    ("72854", "Ozone", "Johnson"),

    # Yell County
    ("72824", "Belleville", "Yell"),
    ("72827", "Bluffton", "Yell"),
    ("72828", "Briggsville", "Yell"),
    ("72829", "Centerville", "Yell"),
    ("72833", "Danville", "Yell"),
    ("72834", "Dardanelle", "Yell"),
    ("72838", "Gravelly", "Yell"),
    ("72842", "Havana", "Yell"),
    ("72853", "Ola", "Yell"),
    ("72857", "Plainview", "Yell"),
    ("72860", "Rover", "Yell"),

    # Franklin County
    ("72820", "Alix", "Franklin"),
    ("72821", "Altus", "Franklin"),
    ("72928", "Branch", "Franklin"),
    ("72930", "Cecil", "Franklin"),
    ("72933", "Charleston", "Franklin"),
    ("72949", "Ozark", "Franklin"),

    # Logan County
    ("72826", "Blue Mountain", "Logan"),
    ("72835", "Delaware", "Logan"),
    ("72851", "New Blaine", "Logan"),
    ("72855", "Paris", "Logan"),
    ("72863", "Scranton", "Logan"),
    ("72865", "Subiaco", "Logan"),
    ("72927", "Booneville", "Logan"),
    ("72943", "Magazine", "Logan"),
    ("72951", "Ratcliff", "Logan"),

    # Scott County
    ("72841", "Harvey", "Scott"),
    ("72926", "Boles", "Scott"),
    ("72950", "Parks", "Scott"),
    ("72958", "Waldron", "Scott"),

    # Sebastian County
    ("72901", "Fort Smith", "Sebastian"),
    ("72902", "Fort Smith", "Sebastian"),
    ("72903", "Fort Smith", "Sebastian"),
    ("72904", "Fort Smith", "Sebastian"),
    ("72905", "Fort Smith", "Sebastian"),
    ("72906", "Fort Smith", "Sebastian"),
    ("72908", "Fort Smith", "Sebastian"),
    ("72913", "Fort Smith", "Sebastian"),
    ("72914", "Fort Smith", "Sebastian"),
    ("72916", "Fort Smith", "Sebastian"),
    ("72917", "Fort Smith", "Sebastian"),
    ("72918", "Fort Smith", "Sebastian"),
    ("72919", "Fort Smith", "Sebastian"),
    ("72923", "Barling", "Sebastian"),
    ("72936", "Greenwood", "Sebastian"),
    ("72937", "Hackett", "Sebastian"),
    ("72938", "Hartford", "Sebastian"),
    ("72940", "Huntington", "Sebastian"),
    ("72941", "Lavaca", "Sebastian"),
    ("72944", "Mansfield", "Sebastian"),
    ("72945", "Midland", "Sebastian"),

    # Crawford County
    ("72921", "Alma", "Crawford"),
    ("72932", "Cedarville", "Crawford"),
    ("72934", "Chester", "Crawford"),
    ("72935", "Dyer", "Crawford"),
    ("72946", "Mountainburg", "Crawford"),
    ("72947", "Mulberry", "Crawford"),
    ("72948", "Natural Dam", "Crawford"),
    ("72952", "Rudy", "Crawford"),
    ("72955", "Uniontown", "Crawford"),
    ("72956", "Van Buren", "Crawford"),
    ("72957", "Van Buren", "Crawford"),
]
