"""Closed code lists accepted by the HUB-3 payment order."""

from types import MappingProxyType

# Order follows the published HUB-3 model list; the last four were added later.
PAYMENT_MODELS: tuple[str, ...] = (
    "00", "01", "02", "03", "04", "05", "06", "07", "08", "09",
    "10", "11", "12", "13", "14", "15", "16", "17", "18", "23",
    "24", "26", "27", "28", "29", "30", "31", "33", "34", "40",
    "41", "42", "43", "55", "62", "63", "64", "65", "67", "68",
    "69", "99", "25", "83", "84", "50",
)

ACCEPTED_PAYMENT_MODELS: frozenset[str] = frozenset(PAYMENT_MODELS)

# ISO 20022 purpose codes with their Croatian titles.
PURPOSE_CODES = MappingProxyType({
    "ADMG": "Administracija",
    "GVEA": "Austrijski državni zaposlenici, Kategorija A",
    "GVEB": "Austrijski državni zaposlenici, Kategorija B",
    "GVEC": "Austrijski državni zaposlenici, Kategorija C",
    "GVED": "Austrijski državni zaposlenici, Kategorija D",
    "BUSB": "Autobusni",
    "CPYR": "Autorsko pravo",
    "HSPC": "Bolnička njega",
    "RDTX": "Cestarina",
    "DEPT": "Depozit",
    "DERI": "Derivati (izvedenice)",
    "FREX": "Devizno tržište",
    "CGDD": "Direktno terećenje nastalo kao rezultat kartične transakcije",
    "DIVD": "Dividenda",
    "BECH": "Dječji doplatak",
    "CHAR": "Dobrotvorno plaćanje",
    "ETUP": "Doplata e-novca",
    "MTUP": "Doplata mobilnog uređaja (bon)",
    "GOVI": "Državno osiguranje",
    "ENRG": "Energenti",
    "CDCD": "Gotovinska isplata",
    "CSDB": "Gotovinska isplata",
    "TCSC": "Gradske naknade",
    "CDCS": "Isplata gotovine s naknadom",
    "FAND": "Isplata naknade za elementarne nepogode",
    "CSLP": "Isplata socijalnih zajmova društava banci",
    "RHBS": "Isplata za vrijeme profesionalne rehabilitacije",
    "GWLT": "Isplata žrtvama rata i invalidima",
    "ADCS": "Isplate za donacije, sponzorstva, savjetodavne, intelektualne i druge usluge",
    "PADD": "Izravno terećenje",
    "INTE": "Kamata",
    "CDDP": "Kartično plaćanje s odgodom",
    "CDCB": "Kartično plaćanje uz gotovinski povrat (Cashback)",
    "BOCE": "Knjiženje konverzije u Back Office-u",
    "POPE": "Knjiženje mjesta kupnje",
    "RCKE": "Knjiženje ponovne prezentacije čeka",
    "AREN": "Knjiženje računa potraživanja",
    "COMC": "Komercijalno plaćanje",
    "UBIL": "Komunalne usluge",
    "COMT": "Konsolidirano plaćanje treće strane za račun potrošača.",
    "SEPI": "Kupnja vrijednosnica (interna)",
    "GDDS": "Kupovina-prodaja roba",
    "GSCB": "Kupovina-prodaja roba i usluga uz gotovinski povrat",
    "GDSV": "Kupovina/prodaja roba i usluga",
    "SCVE": "Kupovina/prodaja usluga",
    "HLTC": "Kućna njega bolesnika",
    "CBLK": "Masovni kliring kartica",
    "MDCS": "Medicinske usluge",
    "NWCM": "Mrežna komunikacija",
    "RENT": "Najam",
    "ALLW": "Naknada",
    "SSBE": "Naknada socijalnog osiguranja",
    "LICF": "Naknada za licencu",
    "GFRP": "Naknada za nezaposlene u toku stečaja",
    "BENE": "Naknada za nezaposlenost/invaliditet",
    "CFEE": "Naknada za poništenje",
    "AEMP": "Naknada za zapošljavanje",
    "COLL": "Naplata",
    "FCOL": "Naplata naknade po kartičnoj transakciji",
    "DBTC": "Naplata putem terećenja",
    "NOWS": "Nenavedeno",
    "IDCP": "Neopozivo plaćanje sa računa debitne kartice",
    "ICCP": "Neopozivo plaćanje sa računa kreditne kartice",
    "BONU": "Novčana nagrada (bonus).",
    "PAYR": "Obračun plaća",
    "BLDM": "Održavanje zgrada",
    "HEDG": "Omeđivanje rizika (Hedging)",
    "CDOC": "Originalno odobrenje",
    "PPTI": "Osiguranje imovine",
    "LBRI": "Osiguranje iz rada",
    "OTHR": "Ostalo",
    "CLPR": "Otplata glavnice kredita za automobil",
    "HLRP": "Otplata stambenog kredita",
    "LOAR": "Otplata zajma",
    "ALMY": "Plaćanje alimentacije",
    "RCPT": "Plaćanje blagajničke potvrde. (ReceiptPayment)",
    "PRCP": "Plaćanje cijene",
    "SUPP": "Plaćanje dobavljača",
    "CFDI": "Plaćanje dospjele glavnice",
    "GOVT": "Plaćanje države",
    "PENS": "Plaćanje mirovine",
    "DCRD": "Plaćanje na račun debitne kartice.",
    "CCRD": "Plaćanje na račun kreditne kartice",
    "SALA": "Plaćanje plaće",
    "REBT": "Plaćanje popusta/rabata",
    "TAXS": "Plaćanje poreza",
    "VATX": "Plaćanje poreza na dodatnu vrijednost",
    "RINP": "Plaćanje rata koje se ponavljaju",
    "IHRP": "Plaćanje rate pri kupnji na otplatu",
    "IVPT": "Plaćanje računa",
    "CDBL": "Plaćanje računa za kreditnu karticu",
    "TREA": "Plaćanje riznice",
    "CMDT": "Plaćanje roba",
    "INTC": "Plaćanje unutar društva",
    "INVS": "Plaćanje za fondove i vrijednosnice",
    "PRME": "Plemeniti metali",
    "AGRT": "Poljoprivredni transfer",
    "INTX": "Porez na dohodak",
    "PTXP": "Porez na imovinu",
    "NITX": "Porez na neto dohodak",
    "ESTX": "Porez na ostavštinu",
    "GSTX": "Porez na robu i usluge",
    "HSTX": "Porez na stambeni prostor",
    "FWLV": "Porez na strane radnike",
    "WHLD": "Porez po odbitku",
    "BEXP": "Poslovni troškovi",
    "REFU": "Povrat",
    "TAXR": "Povrat poreza",
    "RIMB": "Povrat prethodne pogrešne transakcije",
    "OFEE": "Početna naknada (Opening Fee)",
    "ADVA": "Predujam",
    "INSU": "Premija osiguranja",
    "INPC": "Premija osiguranja za vozilo",
    "TRPT": "Prepaid cestarina (ENC)",
    "SUBS": "Pretplata",
    "CASH": "Prijenos gotovine",
    "PENO": "Prisilna naplata",
    "COMM": "Provizija",
    "INSM": "Rata",
    "ELEC": "Račun za električnu energiju",
    "CBTV": "Račun za kabelsku TV",
    "OTLC": "Račun za ostale telekom usluge",
    "GASB": "Račun za plin",
    "WTER": "Račun za vodu",
    "ANNI": "Renta",
    "BBSC": "Rodiljna naknada",
    "NETT": "Saldiranje (netiranje)",
    "CAFI": "Skrbničke naknade (interne)",
    "STDY": "Studiranje",
    "ROYA": "Tantijeme",
    "PHON": "Telefonski račun",
    "FERB": "Trajektni",
    "DMEQ": "Trajna medicinska pomagala",
    "WEBI": "Transakcija inicirana internetom",
    "TELI": "Transakcija inicirana telefonom",
    "HREC": "Transakcija se odnosi na doprinos poslodavca za troškove stanovanja",
    "CBFR": "Transakcija se odnosi na kapitalnu štednju za mirovinu",
    "CBFF": "Transakcija se odnosi na kapitalnu štednju, općenito",
    "TRAD": "Trgovinske usluge",
    "COST": "Troškovi",
    "CPKC": "Troškovi parkiranja",
    "TBIL": "Troškovi telekomunikacija",
    "NWCH": "Troškovi za mrežu",
    "EDUC": "Troškovi školovanja",
    "LIMA": "Upravljanje likvidnošću",
    "ACCT": "Upravljanje računom",
    "ANTS": "Usluge anestezije",
    "VIEW": "Usluge oftalmološke skrbi",
    "LTCF": "Ustanova dugoročne zdravstvene skrbi",
    "ICRF": "Ustanova socijalne skrbi",
    "CVCF": "Ustanova za usluge skrbi za rekonvalescente",
    "PTSP": "Uvjeti plaćanja",
    "MSVC": "Višestruke vrste usluga",
    "SECU": "Vrijednosni papiri",
    "LOAN": "Zajam",
    "FCPM": "Zakašnjele naknade",
    "TRFD": "Zaklada",
    "CDQC": "Zamjenska gotovina",
    "HLTI": "Zdravstveno osiguranje",
    "AIRB": "Zračni",
    "DNTS": "Zubarske usluge",
    "SAVG": "Štednja",
    "RLWY": "Željeznički",
    "LIFI": "Životno osiguranje",
})
